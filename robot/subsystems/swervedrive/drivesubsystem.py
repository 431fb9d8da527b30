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
import math
from typing import Optional, Sequence

from commands2 import Subsystem
from pykit.autolog import autolog_output, autologgable_output
from pykit.logger import Logger
from wpilib import Field2d, SmartDashboard
from wpimath.geometry import Pose2d, Rotation2d
from wpimath.kinematics import ChassisSpeeds, SwerveDrive4Odometry
from wpimath.units import meters_per_second, radians_per_second

from constants import DASHBOARD_UPDATE_INTERVAL, FIELD_ORIENTED_DEFAULT, MAX_SPEED
from lib_6107.subsystems.gyro.gyro import Gyro
from lib_6107.util.gains import DriveGains, GainMode, GainRole
from lib_6107.util.logtracer import LogTracer
from subsystems.swervedrive.kinematics import SwerveKinematics, SwerveModulePositions, SwerveModuleStates
from subsystems.swervedrive.swervemodule import SwerveModule

logger = logging.getLogger(__name__)


@autologgable_output
class DriveSubsystem(Subsystem):
    """
    Swerve drivetrain. Owns the four modules (front-left, front-right, back-left,
    back-right) and the gyro, turns chassis speed requests into module states and
    keeps the odometry up to date every cycle whether or not a command is driving.
    """

    def __init__(self, modules: Sequence[SwerveModule], gyro: Gyro, gains: DriveGains,
                 field: Optional[Field2d] = None) -> None:
        super().__init__()
        self.setName("Drivetrain")

        if len(modules) != 4:
            raise ValueError(f"Swerve drive requires 4 modules, got {len(modules)}")

        self._modules = tuple(modules)
        self._gyro = gyro
        self._gains = gains
        self._field = field

        # Modules are configured with the autonomous gains at construction
        self._gain_mode = GainMode.AUTONOMOUS
        self._field_oriented = FIELD_ORIENTED_DEFAULT
        self._counter = 0

        self.kinematics = SwerveKinematics([module.config.location for module in self._modules])

        self._gyro_inputs = Gyro.GyroIOInputs()
        self._gyro.periodic(self._gyro_inputs)

        # Heading used for odometry. Follows the gyro and falls back to wheel odometry
        # if the gyro drops off the bus
        self._raw_heading = Rotation2d(self._gyro_inputs.yaw)
        self._last_positions: SwerveModulePositions = self.get_module_positions()

        self._odometry = SwerveDrive4Odometry(self.kinematics.kinematics,
                                              self._raw_heading,
                                              self._last_positions)

    @property
    def modules(self) -> tuple[SwerveModule, ...]:
        return self._modules

    @property
    def gyro(self) -> Gyro:
        return self._gyro

    @property
    def gains(self) -> DriveGains:
        return self._gains

    @property
    def gain_mode(self) -> GainMode:
        return self._gain_mode

    @property
    def gyro_inputs(self) -> Gyro.GyroIOInputs:
        return self._gyro_inputs

    @property
    def heading(self) -> Rotation2d:
        """Gyro heading (or the wheel odometry estimate while the gyro is disconnected)"""
        return self._raw_heading

    @property
    def field_oriented(self) -> bool:
        return self._field_oriented

    @field_oriented.setter
    def field_oriented(self, value: bool) -> None:
        self._field_oriented = value
        logger.info(f"Field oriented drive: {value}")

    ###########################################################
    # Driving

    def set_drive_speeds(self, forward: meters_per_second, strafe: meters_per_second, rotate: radians_per_second,
                         field_oriented: Optional[bool] = None) -> None:
        """
        Drive the robot. Forward is +X and strafe is +Y (to the left), rotation is
        counter-clockwise positive.

        :param field_oriented: Interpret forward/strafe relative to the field (away from
                               the driver station) instead of the robot. Default is the
                               current `field_oriented` setting.
        """
        if field_oriented is None:
            field_oriented = self._field_oriented

        if field_oriented:
            speeds = ChassisSpeeds.fromFieldRelativeSpeeds(forward, strafe, rotate, self.heading)
        else:
            speeds = ChassisSpeeds(forward, strafe, rotate)

        self.drive_robot_relative(speeds)

    def drive_robot_relative(self, speeds: ChassisSpeeds) -> None:
        Logger.recordOutput("Drive/ChassisSpeedsSetpoint", speeds)
        self.set_module_states(self.kinematics.to_module_states(speeds))

    def set_module_states(self, states: SwerveModuleStates) -> None:
        states = SwerveKinematics.desaturate(states, MAX_SPEED)

        for module, state in zip(self._modules, states):
            module.set_state(state)

    def set_x_formation(self) -> None:
        """
        Point the wheels inward so the robot resists being pushed
        """
        for module, state in zip(self._modules, self.kinematics.x_formation()):
            module.set_state(state)

    def stop(self) -> None:
        for module in self._modules:
            module.stop()

    def set_motor_brake(self, brake: bool) -> None:
        for module in self._modules:
            module.set_brake_mode(brake)

    ###########################################################
    # Gains

    def set_tele_pid(self) -> None:
        self._apply_gains(GainMode.TELEOP)

    def set_auto_pid(self) -> None:
        self._apply_gains(GainMode.AUTONOMOUS)

    def refresh_tele_pid(self) -> bool:
        """
        Push the teleop gains to the modules again if they are the ones in use.

        :returns: True if the gains were pushed
        """
        if self._gain_mode != GainMode.TELEOP:
            logger.info("Teleop gains updated, will apply at next teleop start")
            return False

        self._apply_gains(GainMode.TELEOP)
        return True

    def _apply_gains(self, mode: GainMode) -> None:
        profile = self._gains.profile(mode)

        for module in self._modules:
            module.set_gains(GainRole.DRIVE, profile.drive)
            module.set_gains(GainRole.STEER, profile.steer)

        self._gain_mode = mode
        logger.info(f"{mode.value} gains applied. Drive: {profile.drive}, Steer: {profile.steer}")

        Logger.recordOutput("Drive/GainMode", mode.value)
        for role in GainRole:
            for name, value in zip("PIDV", profile.get(role).as_tuple()):
                Logger.recordOutput(f"Drive/Gains/{role.value} {name}", value)

    ###########################################################
    # State

    @autolog_output(key="Odometry/Robot")
    def get_pose(self) -> Pose2d:
        return self._odometry.getPose()

    def reset_pose(self, pose: Pose2d) -> None:
        """
        Move the odometry to a known pose (autonomous start, vision correction)
        """
        self._last_positions = self.get_module_positions()
        self._odometry.resetPosition(self._raw_heading, self._last_positions, pose)

    def reset_heading(self) -> None:
        """
        Zero the gyro. The robot keeps its position on the field but now faces 'forward'.
        """
        self._gyro.reset()
        self._gyro_inputs.yaw = 0.0
        self._raw_heading = Rotation2d()

        self.reset_pose(Pose2d(self.get_pose().translation(), Rotation2d()))

    def reset_encoders(self) -> None:
        pose = self.get_pose()

        for module in self._modules:
            module.reset_position()

        self.reset_pose(pose)

    def get_module_states(self) -> SwerveModuleStates:
        return tuple(module.get_state() for module in self._modules)

    def get_module_positions(self) -> SwerveModulePositions:
        return tuple(module.get_position() for module in self._modules)

    def get_desired_module_states(self) -> SwerveModuleStates:
        return tuple(module.desired_state for module in self._modules)

    @autolog_output(key="Drive/MeasuredSpeeds")
    def get_chassis_speeds(self) -> ChassisSpeeds:
        return self.kinematics.to_chassis_speeds(self.get_module_states())

    ###########################################################
    # Periodic

    def periodic(self) -> None:
        LogTracer.resetOuter("DrivePeriodic")

        self._gyro.periodic(self._gyro_inputs)
        Logger.processInputs("Drive/Gyro", self._gyro_inputs)

        for module in self._modules:
            module.periodic()

        LogTracer.record("ModulesPeriodic")

        self._update_odometry()
        LogTracer.record("OdometryUpdate")

        if self._field is not None:
            self._field.setRobotPose(self.get_pose())

        Logger.recordOutput("Drive/DesiredStates", self.get_desired_module_states())
        Logger.recordOutput("Drive/MeasuredStates", self.get_module_states())

        self._counter += 1
        if self._counter % DASHBOARD_UPDATE_INTERVAL == 0:
            self.dashboard_periodic()

        LogTracer.recordTotal()

    def _update_odometry(self) -> None:
        positions = self.get_module_positions()

        if self._gyro_inputs.connected:
            self._raw_heading = Rotation2d(self._gyro_inputs.yaw)
        else:
            twist = self.kinematics.to_twist(self._last_positions, positions)
            self._raw_heading = self._raw_heading + Rotation2d(twist.dtheta)

        self._last_positions = positions
        self._odometry.update(self._raw_heading, positions)

    ###########################################################
    # SmartDashboard support

    def dashboard_initialize(self) -> None:
        """
        Configure the SmartDashboard for this subsystem
        """
        if self._field is not None:
            SmartDashboard.putData("Field", self._field)

        self._gyro.dashboard_initialize()

    def dashboard_periodic(self) -> None:
        """
        Called from periodic function to update dashboard elements for this subsystem
        """
        pose = self.get_pose()
        SmartDashboard.putNumber("Drivetrain/x", pose.x)
        SmartDashboard.putNumber("Drivetrain/y", pose.y)
        SmartDashboard.putNumber("Drivetrain/heading", pose.rotation().degrees())
        SmartDashboard.putBoolean("Drivetrain/field oriented", self._field_oriented)
        SmartDashboard.putString("Drivetrain/gain mode", self._gain_mode.value)

        for module in self._modules:
            state = module.get_state()
            SmartDashboard.putNumber(f"Drivetrain/{module.name}/angle", state.angle.degrees())
            SmartDashboard.putNumber(f"Drivetrain/{module.name}/speed", state.speed)

        self._gyro.dashboard_periodic()

    ###########################################################
    # Simulation support

    def simulationPeriodic(self, **kwargs) -> Optional[float]:
        """
        Called by the scheduler (no arguments) and by the physics engine with the
        `now` and `tm_diff` keywords. Only the physics engine form advances the
        simulated devices. Returns the amperage used for that interval.
        """
        if not kwargs:
            return None

        tm_diff = kwargs["tm_diff"]

        for module in self._modules:
            module.simulation_update(tm_diff)

        speeds = self.get_chassis_speeds()
        self._gyro.sim_yaw = self._gyro.sim_yaw + math.degrees(speeds.omega * tm_diff)

        return 0.0
