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

from lib_6107.commands.command import BaseCommand
from lib_6107.util.tuning import GainTuningBridge
from subsystems.swervedrive.drivesubsystem import DriveSubsystem

logger = logging.getLogger(__name__)


class ResetHeading(BaseCommand):
    """
    Zero the gyro so the direction the robot now faces becomes field 'forward'
    """
    def __init__(self, drivetrain: DriveSubsystem):
        super().__init__(drivetrain)
        self._drivetrain = drivetrain

    def initialize(self) -> None:
        super().initialize()
        self._drivetrain.reset_heading()

    def isFinished(self) -> bool:
        return True

    def runsWhenDisabled(self) -> bool:
        return True


class ApplyTuning(BaseCommand):
    """
    Copy the dashboard tuning values into the teleop gains.

    Does not require the drivetrain so it can run while a drive command is active.
    """
    def __init__(self, tuning: GainTuningBridge):
        super().__init__()
        self._tuning = tuning
        self.changed = False

    def initialize(self) -> None:
        super().initialize()
        self.changed = self._tuning.pull()

        if not self.changed:
            logger.info("Tuning values unchanged")

    def isFinished(self) -> bool:
        return True

    def runsWhenDisabled(self) -> bool:
        return True


class XFormation(BaseCommand):
    """
    Hold the wheels in an X while the command runs
    """
    def __init__(self, drivetrain: DriveSubsystem):
        super().__init__(drivetrain)
        self._drivetrain = drivetrain

    def execute(self) -> None:
        self._drivetrain.set_x_formation()

    def isFinished(self) -> bool:
        return False

    def cleanup(self, interrupted: bool) -> None:
        self._drivetrain.stop()
