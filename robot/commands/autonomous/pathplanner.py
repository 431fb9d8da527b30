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
from typing import Optional

from commands2 import Command, InstantCommand
from pathplannerlib.auto import AutoBuilder, NamedCommands, RobotConfig
from pathplannerlib.controller import PIDConstants, PPHolonomicDriveController
from pathplannerlib.logging import PathPlannerLogging
from pykit.logger import Logger
from wpilib import DriverStation, getDeployDirectory, SendableChooser
from wpimath.kinematics import ChassisSpeeds

from commands.swervedrive.align_swerve import AlignSwerve, Center, Left, Right
from commands.swervedrive.drive_commands import ResetHeading, XFormation
from lib_6107.constants import DEFAULT_ROBOT_PERIOD
from lib_6107.subsystems.vision.target_source import TargetSource
from subsystems.swervedrive.drivesubsystem import DriveSubsystem

logger = logging.getLogger(__name__)


def settings_path() -> str:
    return os.path.join(getDeployDirectory(), 'pathplanner', 'settings.json')


def configure_auto_builder(drivetrain: DriveSubsystem, targets: TargetSource,
                           default_command: Optional[str] = "") -> SendableChooser:
    """
    Register our named commands and hook the drivetrain up to PathPlanner's AutoBuilder.

    :returns: Chooser of the deployed autos. Empty if PathPlanner has not been set up yet.
    """
    # Register named commands first
    register_commands(drivetrain, targets)

    # Does pathplanner exist yet?
    file_path = settings_path()

    if not (os.path.isfile(file_path) and os.access(file_path, os.R_OK)):
        logger.error(f"PathPlanner settings {file_path} not found or is not readable")
        logger.error("Assuming this is an initial run to import Named Commands before creating first Paths/Autos")
        return SendableChooser()

    config = RobotConfig.fromGUISettings()

    AutoBuilder.configure(drivetrain.get_pose,              # Supplier of current robot pose
                          drivetrain.reset_pose,            # Consumer for seeding pose against auto
                          drivetrain.get_chassis_speeds,    # Supplier of current robot relative speeds

                          # Consumer of ChassisSpeeds and feedforwards to drive the robot
                          lambda speeds, feedforwards: drivetrain.drive_robot_relative(
                              ChassisSpeeds.discretize(speeds, DEFAULT_ROBOT_PERIOD)),
                          PPHolonomicDriveController(
                              # PID constants for translation
                              PIDConstants(5.0, 0.0, 0.0),
                              # PID constants for rotation
                              PIDConstants(5.0, 0.0, 0.0)
                          ),
                          config,
                          # Paths are drawn for the blue alliance
                          lambda: (DriverStation.getAlliance() or DriverStation.Alliance.kBlue)
                          == DriverStation.Alliance.kRed,
                          drivetrain)   # Subsystem for requirements

    # PathPlanner and AdvantageScope integration
    PathPlannerLogging.setLogCurrentPoseCallback(lambda pose: Logger.recordOutput("PathPlanner/CurrentPose", pose))
    PathPlannerLogging.setLogTargetPoseCallback(lambda pose: Logger.recordOutput("PathPlanner/TargetPose", pose))
    PathPlannerLogging.setLogActivePathCallback(lambda poses: Logger.recordOutput("PathPlanner/CurrentPath", poses))

    # Load in any Autonomous Commands into the chooser
    return AutoBuilder.buildAutoChooser(default_command)


def register_commands(drivetrain: DriveSubsystem, targets: TargetSource) -> None:
    """
    Commands that can be placed into a PathPlanner auto by name
    """
    commands: dict[str, Command] = {
        "Stop":        InstantCommand(drivetrain.stop, drivetrain),
        "ResetHeading": ResetHeading(drivetrain),
        "XFormation":  XFormation(drivetrain).withTimeout(1.0),
        "AlignLeft":   AlignSwerve(drivetrain, targets, Left()),
        "AlignRight":  AlignSwerve(drivetrain, targets, Right()),
        "AlignCenter": AlignSwerve(drivetrain, targets, Center()),
    }
    for name, command in commands.items():
        NamedCommands.registerCommand(name, command)
