# ------------------------------------------------------------------------ #
#      o-o      o                o                                         #
#     /         |                |                                         #
#    O     o  o O-o  o-o o-o     |  oo o--o o-o o-o                        #
#     \    |  | |  | |-' |   \   o | | |  |  /   /                         #
#      o-o o--O o-o  o-o o    o-o  o-o-o--O o-o o-o                        #
#             |                           |                                #
#          o--o                        o--o                                #
#                        o--o      o         o                             #
#                        |   |     |         |  o                          #
#                        O-Oo  o-o O-o  o-o -o-    o-o o-o                 #
#                        |  \  | | |  | | |  |  | |     \                  #
#                        o   o o-o o-o  o-o  o  |  o-o o-o                 #
#                                                                          #
#    Jemison High School - Huntsville Alabama                              #
# ------------------------------------------------------------------------ #
#
# Swerve drive constants

import math
from dataclasses import dataclass

from wpimath.geometry import Translation2d
from wpimath.units import amperes, meters, turns

from constants import DeviceID
from lib_6107.util.gains import GainSet


@dataclass(frozen=True)
class SwerveModuleConfig:
    """
    Per-corner hardware assignment of a swerve module
    """
    name: str
    drive_motor_id: int
    steer_motor_id: int
    encoder_id: int
    encoder_offset: turns
    location: Translation2d


class DriveConstants:
    # Chassis configuration. The modules sit on a square centered on the robot
    ROBOT_WIDTH: meters = 0.7112
    MODULE_OFFSET: meters = ROBOT_WIDTH / 2

    # Order is always front-left, front-right, back-left, back-right
    MODULE_POSITIONS = (
        Translation2d(MODULE_OFFSET, MODULE_OFFSET),
        Translation2d(MODULE_OFFSET, -MODULE_OFFSET),
        Translation2d(-MODULE_OFFSET, MODULE_OFFSET),
        Translation2d(-MODULE_OFFSET, -MODULE_OFFSET),
    )

    # MK4i L2 gearing
    DRIVE_GEAR_RATIO = 6.75
    STEER_GEAR_RATIO = 150.0 / 7.0

    WHEEL_DIAMETER: meters = 0.106
    METERS_PER_REV: meters = WHEEL_DIAMETER * math.pi * 0.975  # tread wear

    DRIVE_SUPPLY_LIMIT: amperes = 45.0
    DRIVE_STATOR_LIMIT: amperes = 80.0
    STEER_SUPPLY_LIMIT: amperes = 30.0

    # False == counter-clockwise positive
    DRIVE_MOTOR_INVERTED = False
    STEER_MOTOR_INVERTED = True

    # CANcoder magnet offsets (rotations) measured with the wheels pointed straight ahead
    FRONT_LEFT_ENCODER_OFFSET: turns = -0.419189
    FRONT_RIGHT_ENCODER_OFFSET: turns = -0.325928
    BACK_LEFT_ENCODER_OFFSET: turns = -0.475098
    BACK_RIGHT_ENCODER_OFFSET: turns = 0.467041

    MODULE_CONFIGS = (
        SwerveModuleConfig("FrontLeft", DeviceID.FRONT_LEFT_DRIVE_ID, DeviceID.FRONT_LEFT_STEER_ID,
                           DeviceID.FRONT_LEFT_CANCODER_ID, FRONT_LEFT_ENCODER_OFFSET, MODULE_POSITIONS[0]),
        SwerveModuleConfig("FrontRight", DeviceID.FRONT_RIGHT_DRIVE_ID, DeviceID.FRONT_RIGHT_STEER_ID,
                           DeviceID.FRONT_RIGHT_CANCODER_ID, FRONT_RIGHT_ENCODER_OFFSET, MODULE_POSITIONS[1]),
        SwerveModuleConfig("BackLeft", DeviceID.BACK_LEFT_DRIVE_ID, DeviceID.BACK_LEFT_STEER_ID,
                           DeviceID.BACK_LEFT_CANCODER_ID, BACK_LEFT_ENCODER_OFFSET, MODULE_POSITIONS[2]),
        SwerveModuleConfig("BackRight", DeviceID.BACK_RIGHT_DRIVE_ID, DeviceID.BACK_RIGHT_STEER_ID,
                           DeviceID.BACK_RIGHT_CANCODER_ID, BACK_RIGHT_ENCODER_OFFSET, MODULE_POSITIONS[3]),
    )

    # Default closed-loop gains. Teleop and autonomous profiles both start from these
    DRIVE_GAINS = GainSet(p=5.0, i=0.0, d=0.0, v=0.7)
    STEER_GAINS = GainSet(p=750.0, i=5.0, d=15.0, v=0.0)
