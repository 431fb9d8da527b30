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

from typing import Callable, Optional, Tuple

from pykit.logger import Logger
from wpimath.units import meters_per_second

from constants import MAX_ANGULAR_SPEED, MAX_SPEED, ROTATION_DEADZONE, ROTATION_SCALE, X_DEADZONE, Y_DEADZONE
from lib_6107.commands.command import BaseCommand
from subsystems.swervedrive.drivesubsystem import DriveSubsystem

Axis = Callable[[], float]


class PadDrive(BaseCommand):
    """
    Default drive command. Drives the swerve from the driver controller sticks
    until interrupted.

    Left stick translates, right stick X rotates. Sticks are read through callables
    (normally `CommandXboxController.getLeftX` and friends).
    """
    def __init__(self, drivetrain: DriveSubsystem, left_x: Axis, left_y: Axis, right_x: Axis,
                 field_oriented: Optional[Callable[[], bool]] = None):
        super().__init__(drivetrain)

        self._drivetrain = drivetrain
        self._left_x = left_x
        self._left_y = left_y
        self._right_x = right_x
        self._field_oriented = field_oriented or (lambda: drivetrain.field_oriented)

    @staticmethod
    def position_set(left_x: float, left_y: float) -> Tuple[meters_per_second, meters_per_second]:
        """
        Scale the left stick to (forward, strafe) speeds. Pushing the stick up
        or left reads negative, so both axes are flipped.
        """
        strafe = -left_x * MAX_SPEED
        if abs(strafe) < X_DEADZONE:
            strafe = 0.0

        forward = -left_y * MAX_SPEED
        if abs(forward) < Y_DEADZONE:
            forward = 0.0

        return forward, strafe

    @staticmethod
    def rotation_set(right_x: float) -> float:
        rotation = -right_x * MAX_ANGULAR_SPEED if abs(right_x) >= ROTATION_DEADZONE else 0.0
        return rotation * ROTATION_SCALE

    def execute(self) -> None:
        """
        The main body of a command. Called repeatedly while the command is scheduled.
        """
        forward, strafe = self.position_set(self._left_x(), self._left_y())
        rotation = self.rotation_set(self._right_x())

        Logger.recordOutput("PadDrive/Forward", forward)
        Logger.recordOutput("PadDrive/Strafe", strafe)
        Logger.recordOutput("PadDrive/Rotation", rotation)

        self._drivetrain.set_drive_speeds(forward, strafe, rotation, self._field_oriented())

    def isFinished(self) -> bool:
        return False  # default command, runs until interrupted
