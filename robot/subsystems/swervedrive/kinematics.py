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
import logging
from typing import List, Sequence, Tuple

from wpimath.geometry import Rotation2d, Translation2d, Twist2d
from wpimath.kinematics import ChassisSpeeds, SwerveDrive4Kinematics, SwerveModulePosition, SwerveModuleState
from wpimath.units import meters_per_second

from lib_6107.constants import SPEED_EPSILON

logger = logging.getLogger(__name__)

SwerveModuleStates = Tuple[SwerveModuleState, SwerveModuleState, SwerveModuleState, SwerveModuleState]
SwerveModulePositions = Tuple[SwerveModulePosition, SwerveModulePosition, SwerveModulePosition, SwerveModulePosition]


class SwerveKinematics:
    """
    Maps chassis velocities to the four module states and back.

    Module order is front-left, front-right, back-left, back-right. The geometry is
    fixed when the object is created.
    """

    def __init__(self, module_locations: Sequence[Translation2d]):
        if len(module_locations) != 4:
            raise ValueError(f"Swerve drive requires 4 module locations, got {len(module_locations)}")

        self._locations = tuple(module_locations)
        self._kinematics = SwerveDrive4Kinematics(*self._locations)

        # Last commanded wheel headings, reused when the robot is asked to stand still
        self._held_angles: List[Rotation2d] = [Rotation2d() for _ in self._locations]

    @property
    def kinematics(self) -> SwerveDrive4Kinematics:
        """The underlying WPILib kinematics, for odometry and path following"""
        return self._kinematics

    @property
    def module_locations(self) -> Tuple[Translation2d, ...]:
        return self._locations

    def to_module_states(self, speeds: ChassisSpeeds) -> SwerveModuleStates:
        """
        Inverse kinematics. When every module would be (nearly) stopped, the wheels
        keep their previous heading instead of snapping to an arbitrary angle.
        """
        states = self._kinematics.toSwerveModuleStates(speeds)

        if all(abs(state.speed) < SPEED_EPSILON for state in states):
            return tuple(SwerveModuleState(0.0, angle) for angle in self._held_angles)

        self._held_angles = [state.angle for state in states]
        return states

    def to_chassis_speeds(self, states: Sequence[SwerveModuleState]) -> ChassisSpeeds:
        """
        Forward kinematics (least squares fit of the module states)
        """
        return self._kinematics.toChassisSpeeds(tuple(states))

    def to_twist(self, start: Sequence[SwerveModulePosition], end: Sequence[SwerveModulePosition]) -> Twist2d:
        """
        Robot motion between two sets of module positions
        """
        return self._kinematics.toTwist2d(tuple(start), tuple(end))

    @staticmethod
    def desaturate(states: Sequence[SwerveModuleState], max_speed: meters_per_second) -> SwerveModuleStates:
        """
        Scale all module speeds down together if any of them is over `max_speed`
        """
        return SwerveDrive4Kinematics.desaturateWheelSpeeds(tuple(states), max_speed)

    def x_formation(self) -> SwerveModuleStates:
        """
        Zero speed with every wheel pointed at the robot center, which makes the
        robot hard to push. The wheels hold this heading until the robot moves again.
        """
        states = tuple(SwerveModuleState(0.0, location.angle()) for location in self._locations)

        self._held_angles = [state.angle for state in states]
        return states
