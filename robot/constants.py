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
# Constants for source in this subdirectory will go here

import math
import os
from enum import Enum, IntEnum, unique

from wpilib import RobotBase
from wpimath.units import meters_per_second, radians_per_second, seconds

from lib_6107.constants import *


class RobotModes(Enum):
    """Enum for robot modes."""
    REAL = 1
    SIMULATION = 2
    REPLAY = 3


SIM_MODE = (
    RobotModes.REPLAY if "LOG_PATH" in os.environ and os.environ["LOG_PATH"] != ""
    else RobotModes.SIMULATION
)
ROBOT_MODE = RobotModes.REAL if RobotBase.isReal() else SIM_MODE

TEAM = 6107
YEAR = 2025

###############################################################################
# Driver station
DRIVER_CONTROLLER_PORT = 0

#################################################################
# Drive subsystem related constants
#
# Maximum speeds of the robot. Commands scale joystick input to these

MAX_SPEED: meters_per_second = 5.76
MAX_ANGULAR_SPEED: radians_per_second = (14 * math.pi) / 3

# Joystick handling for the pad drive command
JOYSTICK_DEADBAND = 0.05
X_DEADZONE: meters_per_second = 0.1
Y_DEADZONE: meters_per_second = 0.1
ROTATION_DEADZONE = 0.2     # raw stick value
ROTATION_SCALE = 0.8

# Hold time on motor brakes when disabled
WHEEL_LOCK_TIME: seconds = 3

GYRO_TYPE = "Pigeon2"
GYRO_REVERSED = False  # (affects field-relative driving)
GYRO_UPDATE_FREQUENCY = 100.0  # Hz

FIELD_ORIENTED_DEFAULT = True

# Periodic calls between SmartDashboard updates
DASHBOARD_UPDATE_INTERVAL = 10


#################################################################
# Device CAN bus IDs

@unique
class DeviceID(IntEnum):
    FRONT_LEFT_STEER_ID = 1
    FRONT_LEFT_DRIVE_ID = 2
    FRONT_RIGHT_STEER_ID = 3
    FRONT_RIGHT_DRIVE_ID = 4
    BACK_LEFT_STEER_ID = 5
    BACK_LEFT_DRIVE_ID = 6
    BACK_RIGHT_STEER_ID = 7
    BACK_RIGHT_DRIVE_ID = 8

    FRONT_LEFT_CANCODER_ID = 9
    FRONT_RIGHT_CANCODER_ID = 10
    BACK_LEFT_CANCODER_ID = 11
    BACK_RIGHT_CANCODER_ID = 12

    PIGEON_ID = 16


CANBUS = ""     # roboRIO CAN bus

#################################################################
# Vision alignment

LEFT_CAMERA_NAME = "LeftCamera"
RIGHT_CAMERA_NAME = "RightCamera"

LEFT_OFFSET = 0.0
RIGHT_OFFSET = 0.0

ALIGN_Y_P = 0.2
ALIGN_Y_TOLERANCE = 1.5
ALIGN_LOST_TARGET_TIMEOUT: seconds = 1.0
