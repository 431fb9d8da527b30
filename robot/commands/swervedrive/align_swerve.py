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
from dataclasses import dataclass
from typing import Callable, Tuple, Union

from pykit.logger import Logger
from wpilib import Timer
from wpimath.controller import PIDController

from constants import (ALIGN_LOST_TARGET_TIMEOUT, ALIGN_Y_P, ALIGN_Y_TOLERANCE, LEFT_CAMERA_NAME, LEFT_OFFSET,
                       RIGHT_CAMERA_NAME, RIGHT_OFFSET)
from lib_6107.commands.command import BaseCommand
from lib_6107.subsystems.vision.target_source import TargetSource
from subsystems.swervedrive.drivesubsystem import DriveSubsystem

logger = logging.getLogger(__name__)


# Which side of the AprilTag to line up on. The camera on the opposite side of the
# robot has the better view of the tag.

@dataclass(frozen=True)
class Left:
    camera: str = RIGHT_CAMERA_NAME
    offset: float = LEFT_OFFSET


@dataclass(frozen=True)
class Right:
    camera: str = LEFT_CAMERA_NAME
    offset: float = RIGHT_OFFSET


@dataclass(frozen=True)
class Center:
    camera: str = RIGHT_CAMERA_NAME
    offset: float = 0.0


AlignSide = Union[Left, Right, Center]


def side_settings(side: AlignSide) -> Tuple[str, float]:
    """
    Camera name and lateral offset for an alignment side
    """
    match side:
        case Left(camera, offset) | Right(camera, offset) | Center(camera, offset):
            return camera, offset

        case _:
            raise ValueError(f"Unknown alignment side: {side!r}")


class AlignSwerve(BaseCommand):
    """
    Strafe sideways until the robot is lined up with the AprilTag in view of the
    camera for `side`. Forward and rotation are held at zero.

    Finishes once no tag has been seen for ALIGN_LOST_TARGET_TIMEOUT seconds.
    """
    def __init__(self, drivetrain: DriveSubsystem, targets: TargetSource, side: AlignSide,
                 clock: Callable[[], float] = Timer.getFPGATimestamp):
        super().__init__(drivetrain)

        self._drivetrain = drivetrain
        self._targets = targets
        self._side = side
        self._camera, self._offset = side_settings(side)
        self._clock = clock

        self.setName(f"AlignSwerve{type(side).__name__}")

        self._y_controller = PIDController(ALIGN_Y_P, 0.0, 0.0)
        self._y_controller.setTolerance(ALIGN_Y_TOLERANCE)
        self._y_controller.setSetpoint(0.0)

        self._last_seen = 0.0

    @property
    def side(self) -> AlignSide:
        return self._side

    @property
    def camera(self) -> str:
        return self._camera

    def initialize(self) -> None:
        """
        Called just before this Command runs the first time
        """
        super().initialize()

        self._y_controller.reset()
        self._last_seen = self._clock()

    def execute(self) -> None:
        """
        The main body of a command. Called repeatedly while the command is scheduled.
        """
        if self._targets.has_target(self._camera):
            self._last_seen = self._clock()

        error = self._targets.y(self._camera) - self._offset
        strafe = self._y_controller.calculate(error)

        Logger.recordOutput("Align/Error", error)
        Logger.recordOutput("Align/Strafe", strafe)

        self._drivetrain.set_drive_speeds(0.0, strafe, 0.0, field_oriented=False)

    def isFinished(self) -> bool:
        """
        Returns whether this command has finished. Once a command finishes -- indicated by this method
        returning true -- the scheduler will call its `end` method.
        """
        return self._clock() - self._last_seen >= ALIGN_LOST_TARGET_TIMEOUT

    def cleanup(self, interrupted: bool) -> None:
        self._drivetrain.stop()
