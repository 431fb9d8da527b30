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
from typing import List, Optional

from commands2 import Command, CommandScheduler, InstantCommand, Subsystem
from commands2.button import CommandXboxController
from wpilib import Field2d, RobotBase, SmartDashboard

import constants
from commands.autonomous import pathplanner
from commands.swervedrive.align_swerve import AlignSwerve, Center, Left, Right
from commands.swervedrive.drive_commands import ApplyTuning, ResetHeading, XFormation
from commands.swervedrive.pad_drive import PadDrive
from constants import DeviceID
from lib_6107.subsystems.gyro.gyro import Gyro
from lib_6107.subsystems.vision.target_source import PhotonTargetSource, TargetSource
from lib_6107.util.gains import DriveGains
from lib_6107.util.tuning import GainTuningBridge
from pykit.logger import Logger
from subsystems.swervedrive.constants import DriveConstants
from subsystems.swervedrive.drivesubsystem import DriveSubsystem
from subsystems.swervedrive.swervemodule import create_devices, SwerveModule

logger = logging.getLogger(__name__)


class RobotContainer:
    """
    This class is where the bulk of the robot should be declared. Since Command-based is a
    "declarative" paradigm, very little robot logic should actually be handled in the :class:`.Robot`
    periodic methods (other than the scheduler calls). Instead, the structure of the robot (including
    subsystems, commands, and button mappings) should be declared here.

    Everything is created here and handed to whoever needs it. Nothing else builds
    devices or subsystems.
    """
    def __init__(self, robot: 'MyRobot') -> None:
        logger.debug("*** called container __init__")
        self.robot = robot
        self.simulation = RobotBase.isSimulation()

        # The driver's controller
        self.driver_controller = CommandXboxController(constants.DRIVER_CONTROLLER_PORT)

        ##########################################
        # Subsystem Initialization
        #
        # The robot core code will already call the periodic() function
        # as needed, but having our own list (iterated in order) allows us to move much of
        # the other subsystem 'tasks' into a generic loop.
        self.subsystems: List[Subsystem] = []

        ##########################################
        #  Drivetrain
        #
        self.gains = DriveGains.from_defaults(DriveConstants.DRIVE_GAINS, DriveConstants.STEER_GAINS)

        modules = [SwerveModule(config, *create_devices(config, self.simulation),
                                self.gains.autonomous.drive, self.gains.autonomous.steer)
                   for config in DriveConstants.MODULE_CONFIGS]

        self.gyro = Gyro.create("Sim" if self.simulation else constants.GYRO_TYPE,
                                DeviceID.PIGEON_ID,
                                is_reversed=constants.GYRO_REVERSED,
                                update_frequency=constants.GYRO_UPDATE_FREQUENCY)
        self.gyro.initialize()

        self.robot_drive = DriveSubsystem(modules, self.gyro, self.gains, self.field)
        self.subsystems.append(self.robot_drive)

        ##########################################
        #   TUNING
        #
        # Dashboard edits only reach the motors when the driver asks for them
        self.tuning = GainTuningBridge(self.gains.teleop, self.robot_drive.refresh_tele_pid)

        ##########################################
        #   VISION
        #
        self.targets: TargetSource = PhotonTargetSource()

        ##########################################
        #   TELEMETRY
        #
        self._configure_command_logging()

        ##########################################
        #   PathPlanner.  Do this last since it may pull in commands that need the previously
        #                 initialized subsystems.
        self._auto_chooser = pathplanner.configure_auto_builder(self.robot_drive, self.targets)
        self.configure_additional_autos()

        ########################################################
        # Configure the button bindings
        self.configure_button_bindings_xbox(self.driver_controller)

        ########################################################
        # Initialize the Smart dashboard for each subsystem
        for subsystem in self.subsystems:
            if hasattr(subsystem, "dashboard_initialize") and callable(getattr(subsystem,
                                                                               "dashboard_initialize")):
                subsystem.dashboard_initialize()

        SmartDashboard.putData("Tuning/Apply", ApplyTuning(self.tuning))

    @property
    def field(self) -> Optional[Field2d]:
        return self.robot.field

    @staticmethod
    def _configure_command_logging() -> None:
        command_count: dict[str, int] = {}

        # Tracks active commands.
        def logCommandFunction(command: Command, active: bool) -> None:
            name = command.getName()
            count = command_count.get(name, 0) + (1 if active else -1)
            command_count[name] = count
            Logger.recordOutput(f"Commands/{name}", count > 0)

        scheduler = CommandScheduler.getInstance()

        scheduler.onCommandInitialize(lambda c: logCommandFunction(c, True))
        scheduler.onCommandFinish(lambda c: logCommandFunction(c, False))
        scheduler.onCommandInterrupt(lambda c: logCommandFunction(c, False))

    def configure_button_bindings_xbox(self, controller: CommandXboxController) -> None:
        """
        Use this method to define your button->command mappings.

        LS == Left Stick    - Robot direction on field. Fwd, Back, Left, Right (from operators perspective)
        RS == Right Stick   - Robot rotation  <- Counter Clockwise  -> Clockwise

        LB == Left Bumper   - Align to the left of the AprilTag (while pressed)
        RB == Right Bumper  - Align to the right of the AprilTag (while pressed)

        A == A Button (Bottom) - Align centered on the AprilTag (while pressed)
        X == X Button (Left)   - Lock wheels in an X (while pressed)
        Y == Y Button (Top)    - Apply dashboard tuning values to the teleop gains

        Start Button (three lines)  - Reset Gyro
        Back Button                 - Toggle field oriented drive
        """
        # Note that X is defined as forward according to WPILib convention,
        # and Y is defined as to the left according to WPILib convention.
        self.robot_drive.setDefaultCommand(PadDrive(self.robot_drive,
                                                    controller.getLeftX,
                                                    controller.getLeftY,
                                                    controller.getRightX))

        controller.leftBumper().whileTrue(AlignSwerve(self.robot_drive, self.targets, Left()))
        controller.rightBumper().whileTrue(AlignSwerve(self.robot_drive, self.targets, Right()))
        controller.a().whileTrue(AlignSwerve(self.robot_drive, self.targets, Center()))

        controller.x().whileTrue(XFormation(self.robot_drive))
        controller.y().onTrue(ApplyTuning(self.tuning))

        controller.start().onTrue(ResetHeading(self.robot_drive))
        controller.back().onTrue(InstantCommand(self.toggle_field_oriented))

    def toggle_field_oriented(self) -> None:
        self.robot_drive.field_oriented = not self.robot_drive.field_oriented

    def disablePIDSubsystems(self) -> None:
        """
        Hold the robot in place when disabled. Brakes are released again after
        WHEEL_LOCK_TIME so the robot can be pushed.
        """
        self.robot_drive.set_motor_brake(True)

    def get_autonomous_command(self) -> Optional[Command]:
        """
        :returns: the command to run in autonomous
        """
        return self._auto_chooser.getSelected()

    def configure_additional_autos(self):
        """
        Autos that do not come from PathPlanner
        """
        self._auto_chooser.setDefaultOption("Do nothing", self.get_do_nothing())
        SmartDashboard.putData("Chosen Auto", self._auto_chooser)

    def get_do_nothing(self) -> Command:
        """
        Have robot stop

        Makes a good default autonomous default while robot is still under test
        """
        return InstantCommand(lambda: self.robot_drive.stop(), self.robot_drive)
