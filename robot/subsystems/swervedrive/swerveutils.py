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
# Angle helpers for swerve modules

import math

from wpimath.geometry import Rotation2d
from wpimath.kinematics import SwerveModuleState
from wpimath.units import degrees

MAX_STEER_TRAVEL: degrees = 90.0


def wrap_degrees(angle: degrees) -> degrees:
    """
    Wrap an angle into the range (-180, 180]
    """
    wrapped = math.fmod(angle, 360.0)

    if wrapped <= -180.0:
        wrapped += 360.0
    elif wrapped > 180.0:
        wrapped -= 360.0

    return wrapped


def angle_difference(target: Rotation2d, current: Rotation2d) -> degrees:
    """
    Shortest signed rotation from `current` to `target`, in (-180, 180] degrees
    """
    return wrap_degrees(target.degrees() - current.degrees())


def optimize(desired: SwerveModuleState, current_angle: Rotation2d) -> SwerveModuleState:
    """
    Pick the equivalent of `desired` that needs the least steering from `current_angle`.

    If the wheel would have to turn more than 90 degrees, aim it the opposite way
    and run it backwards instead. The desired state is left untouched and a new state
    is returned.
    """
    delta = angle_difference(desired.angle, current_angle)

    if abs(delta) > MAX_STEER_TRAVEL:
        return SwerveModuleState(-desired.speed,
                                 desired.angle.rotateBy(Rotation2d.fromDegrees(180.0)))

    return SwerveModuleState(desired.speed, desired.angle)
