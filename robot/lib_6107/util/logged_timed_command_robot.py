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

import hal
from commands2 import TimedCommandRobot
# pykit & AdvantageScope support
from pykit.logger import Logger
from wpilib import RobotController

logger = logging.getLogger(__name__)

class LoggedTimedCommandRobot(TimedCommandRobot):
    """
    Provides a wpilib TimedCommandRobot with pykit logging capabilities.

    Each loop runs the pykit 'before user code' step (which loads inputs from a log
    file during replay), the normal robot and scheduler periodic code, and then the
    'after user code' step which saves the outputs for the cycle.
    """
    default_period = 0.02  # seconds

    def __init__(self):
        super().__init__(period=self.default_period)

    def startCompetition(self) -> None:
        """
        Record the time taken by robot initialization and start the pykit receivers
        before running the normal main loop.
        """
        init_end = RobotController.getFPGATime()
        Logger.periodicAfterUser(init_end, 0)

        hal.observeUserProgramStarting()
        Logger.startReciever()
        logger.info("pykit receivers started")

        super().startCompetition()

    def robotPeriodic(self):
        # The scheduler (and with it every subsystem periodic) runs inside the base
        # class robotPeriodic, so the user code of a cycle is bracketed here.
        periodic_before_start = RobotController.getFPGATime()
        Logger.periodicBeforeUser()

        user_code_start = RobotController.getFPGATime()

        super().robotPeriodic()

        user_code_end = RobotController.getFPGATime()
        Logger.periodicAfterUser(user_code_end - user_code_start,
                                 user_code_start - periodic_before_start)
