#!/usr/bin/env python3
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
import os
import sys
from typing import Optional

import wpilib
from commands2 import CommandScheduler
from commands2.command import Command
from phoenix6 import SignalLogger
# pykit & AdvantageScope support
from pykit.logger import Logger
from pykit.networktables.nt4Publisher import NT4Publisher
from pykit.wpilog.wpilogreader import WPILOGReader
from pykit.wpilog.wpilogwriter import WPILOGWriter
from wpilib import DriverStation, Field2d, LiveWindow, SmartDashboard, Timer

import constants
from lib_6107.util.logged_timed_command_robot import LoggedTimedCommandRobot
from lib_6107.util.logtracer import LogTracer
from lib_6107.util.phoenix6_signals import Phoenix6Signals
from robotcontainer import RobotContainer
from version import VERSION

# Setup Logging
logger = logging.getLogger(__name__)


class MyRobot(LoggedTimedCommandRobot):
    """
    Our default robot class

    Command v2 robots are encouraged to inherit from TimedCommandRobot, which
    has an implementation of robotPeriodic which runs the scheduler for you
    """
    def __init__(self):
        # Initialize our base class, choosing the default scheduler period
        super().__init__()

        Logger.recordMetadata("Robot", type(self).__name__)
        Logger.recordMetadata("Team", str(constants.TEAM))
        Logger.recordMetadata("Year", str(constants.YEAR))
        Logger.recordMetadata("Version", VERSION)

        match constants.ROBOT_MODE:
            case constants.RobotModes.REAL:
                deploy_config = wpilib.deployinfo.getDeployData()

                if deploy_config is not None:
                    Logger.recordMetadata("Deploy Host", deploy_config.get("deploy-host", ""))
                    Logger.recordMetadata("Deploy User", deploy_config.get("deploy-user", ""))
                    Logger.recordMetadata("Deploy Date", deploy_config.get("deploy-date", ""))
                    Logger.recordMetadata("Git Hash", deploy_config.get("git-hash", ""))
                    Logger.recordMetadata("Git Branch", deploy_config.get("git-branch", ""))

                Logger.addDataReciever(NT4Publisher(True))
                Logger.addDataReciever(WPILOGWriter())

            case constants.RobotModes.SIMULATION:
                Logger.addDataReciever(WPILOGWriter())
                Logger.addDataReciever(NT4Publisher(True))

            case constants.RobotModes.REPLAY:
                #
                #  To run back a log file in replay mode, set the `LOG_PATH` environment variable
                #  and then run in simulation.
                #
                #    LOG_PATH=/path/to/log/file.wpilog robotpy --main robot sim
                #
                self.UseTiming = False  # Disable timing in replay mode, run as fast as possible

                log_path = os.path.abspath(os.environ["LOG_PATH"])

                Logger.setReplaySource(WPILOGReader(log_path))
                Logger.addDataReciever(WPILOGWriter(log_path[:-7] + "_sim.wpilog"))

        Logger.start()

        self._container: Optional[RobotContainer] = None
        self._autonomous_command: Optional[Command] = None

        self.disabledTimer: Timer = Timer()
        self.field: Optional[Field2d] = None

    @property
    def container(self) -> RobotContainer:
        return self._container

    def robotInit(self) -> None:
        """
        This function is run when the robot is first started up and should be used for any
        initialization code.
        """
        logger.info("robotInit: entry")
        super().robotInit()

        # pykit does the logging, turn off the Phoenix and LiveWindow extras
        SignalLogger.enable_auto_logging(False)
        LiveWindow.disableAllTelemetry()

        # Set up logging
        self._logging_init()

        version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
        logger.info(f"Python: {version}, Software Version: {VERSION}")

        # Set up our playing field
        self.field = Field2d()
        SmartDashboard.putData("Field", self.field)

        # Instantiate our RobotContainer.  This will perform all our button bindings, and put our
        # autonomous chooser on the dashboard.
        self._container = RobotContainer(self)

        logger.info("robotInit: exit")

    @staticmethod
    def _logging_init():
        match constants.ROBOT_MODE:
            case constants.RobotModes.REAL:
                logging.getLogger().setLevel(logging.WARNING)  # Python logging
                logging.getLogger("wpilib").setLevel(logging.ERROR)
                logging.getLogger("commands2").setLevel(logging.ERROR)

            case constants.RobotModes.SIMULATION:
                DriverStation.silenceJoystickConnectionWarning(True)
                logging.getLogger().setLevel(logging.INFO)
                logging.getLogger("wpilib").setLevel(logging.DEBUG)
                logging.getLogger("commands2").setLevel(logging.DEBUG)

            case constants.RobotModes.REPLAY:
                logging.getLogger().setLevel(logging.ERROR)
                logging.getLogger("wpilib").setLevel(logging.ERROR)
                logging.getLogger("commands2").setLevel(logging.ERROR)

    def robotPeriodic(self) -> None:
        """
        Periodic code for all modes should go here.

        Device signals are refreshed first so every subsystem periodic (run by the
        scheduler in the base class) sees the same snapshot.

        Default period is 20 mS.
        """
        LogTracer.resetOuter("RobotPeriodic")

        status = Phoenix6Signals.refresh()
        if not status.is_ok():
            logger.debug(f"Phoenix signal refresh: {status}")

        LogTracer.record("PhoenixUpdate")
        LogTracer.recordTotal()

        # Subsystems trace their own periodic from inside the scheduler
        super().robotPeriodic()

    def disabledInit(self) -> None:
        """
        Initialization code for disabled mode should go here.

        Users should override this method for initialization code which will be
        called each time the robot enters disabled mode.
        """
        logger.info("disabledInit: entry")
        super().disabledInit()

        for subsystem in self.container.subsystems:
            if hasattr(subsystem, "stop") and callable(getattr(subsystem, "stop")):
                subsystem.stop()

        self.container.disablePIDSubsystems()

        self.disabledTimer.reset()
        self.disabledTimer.start()

    def disabledPeriodic(self) -> None:
        """
        Periodic code for disabled mode should go here.
        """
        if self.disabledTimer.isRunning() and self.disabledTimer.hasElapsed(constants.WHEEL_LOCK_TIME):
            self.container.robot_drive.set_motor_brake(False)
            self.disabledTimer.stop()
            self.disabledTimer.reset()

    def disabledExit(self) -> None:
        """
        Exit code for disabled mode should go here.
        """
        super().disabledExit()
        logger.info("disabledExit: entry")
        self.disabledTimer.stop()
        self.disabledTimer.reset()

        self.container.robot_drive.set_motor_brake(True)

    def autonomousInit(self) -> None:
        """
        Initialization code for autonomous mode should go here.

        Users should override this method for initialization code which will be
        called each time the robot enters autonomous mode.
        """
        super().autonomousInit()
        logger.info("autonomousInit: entry")

        self.container.robot_drive.set_auto_pid()

        self._autonomous_command = self.container.get_autonomous_command()

        if self._autonomous_command:
            self._autonomous_command.schedule()

    def autonomousExit(self) -> None:
        """
        Exit code for autonomous mode should go here.
        """
        super().autonomousExit()
        logger.info("autonomousExit: entry")

        if self._autonomous_command:
            self._autonomous_command.cancel()

    def teleopInit(self) -> None:
        """
        Initialization code for teleop mode should go here.

        Users should override this method for initialization code which will be
        called each time the robot enters teleop mode.
        """
        super().teleopInit()
        logger.info("teleopInit: entry")

        # Stop what we are doing...
        if self._autonomous_command:
            self._autonomous_command.cancel()
        else:
            CommandScheduler.getInstance().cancelAll()

        self.container.robot_drive.set_tele_pid()

    def testInit(self) -> None:
        """
        Initialization code for test mode should go here.
        """
        super().testInit()
        logger.debug("*** called testInit")
        CommandScheduler.getInstance().cancelAll()
