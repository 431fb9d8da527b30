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
from enum import Enum

from commands2 import Command, Subsystem
from pykit.logger import Logger
from wpilib import SmartDashboard, Timer

logger = logging.getLogger(__name__)


class CommandPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


class BaseCommand(Command):
    """
    Base Command class for Team 6107 robotics

    Tracks where the command is in its life cycle:

        IDLE --initialize--> RUNNING --end--> FINISHED --initialize--> RUNNING ...

    Derived classes put their clean up in `cleanup()` rather than overriding `end()`,
    so it runs exactly once for both normal completion and interruption.
    """
    def __init__(self, *requirements: Subsystem):
        super().__init__()
        self.setName(self.get_class_name())
        self.addRequirements(*requirements)

        self._phase = CommandPhase.IDLE
        self._start_time: float = 0.0
        self._interrupted = False

    @classmethod
    def get_class_name(cls) -> str:
        return cls.__name__

    @property
    def phase(self) -> CommandPhase:
        return self._phase

    @property
    def interrupted(self) -> bool:
        """Did the last run end by interruption/cancel"""
        return self._interrupted

    def _set_phase(self, phase: CommandPhase) -> None:
        self._phase = phase
        SmartDashboard.putString(f"command/{self.getName()}", phase.value)
        Logger.recordOutput(f"CommandPhase/{self.getName()}", phase.value)

    def initialize(self) -> None:
        """
        Called just before this Command runs the first time
        """
        self._start_time = Timer.getFPGATimestamp()
        self._interrupted = False
        self._set_phase(CommandPhase.RUNNING)

        logger.info(f"{self.getName()}: Started at {self._start_time:.2f}")

    def end(self, interrupted: bool) -> None:
        """
        The action to take when the command ends. Called when either the command finishes normally, or
        when it interrupted/canceled.

        Do not schedule commands here that share requirements with this command. Use :meth:`.andThen` instead.

        :param interrupted: whether the command was interrupted/canceled
        """
        if self._phase != CommandPhase.RUNNING:
            return

        self._interrupted = interrupted
        self.cleanup(interrupted)
        self._set_phase(CommandPhase.FINISHED)

        end_time = Timer.getFPGATimestamp()
        logger.info(f"{self.getName()}: {'Interrupted' if interrupted else 'Ended'} at {end_time:.1f} s "
                    f"after {end_time - self._start_time:.1f} s")

    def cleanup(self, interrupted: bool) -> None:
        """
        Put any actuators this command was using into a safe state
        """
