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
from typing import Tuple

from pykit.logger import Logger
from wpilib import Alert
from wpimath.geometry import Rotation2d
from wpimath.kinematics import SwerveModulePosition, SwerveModuleState
from wpimath.units import meters, meters_per_second, turns_per_second, seconds

from constants import CANBUS
from lib_6107.constants import RADIANS_PER_REVOLUTION
from lib_6107.subsystems.motors.motor import Actuator, AngleSensor, MotorConfig
from lib_6107.subsystems.motors.sim import SimActuator, SimAngleSensor
from lib_6107.subsystems.pykit.swervedrive_io import SwerveModuleIO
from lib_6107.util.gains import GainRole, GainSet
from subsystems.swervedrive.constants import DriveConstants, SwerveModuleConfig
from subsystems.swervedrive.swerveutils import optimize, wrap_degrees

logger = logging.getLogger(__name__)


def create_devices(config: SwerveModuleConfig, simulation: bool) -> Tuple[Actuator, Actuator, AngleSensor]:
    """
    Create the drive motor, steer motor and absolute encoder for one corner
    """
    if simulation:
        drive = SimActuator(config.drive_motor_id)
        steer = SimActuator(config.steer_motor_id)
        return drive, steer, SimAngleSensor(config.encoder_id, steer)

    from lib_6107.subsystems.motors.talonfx import CANcoderSensor, TalonFXActuator

    # Encoder first so the steer motor can fuse with it
    encoder = CANcoderSensor(config.encoder_id, config.encoder_offset, CANBUS)
    return TalonFXActuator(config.drive_motor_id, CANBUS), TalonFXActuator(config.steer_motor_id, CANBUS), encoder


class SwerveModule(SwerveModuleIO):
    """
    One corner of the swerve drive. Owns a drive motor, a steer motor and the
    absolute encoder on the steering axis.

    The drive motor runs in motor rotor units. The steer motor is fused with the
    encoder so its position is in rotations of the wheel about the steering axis.
    """

    def __init__(self, config: SwerveModuleConfig, drive: Actuator, steer: Actuator, encoder: AngleSensor,
                 drive_gains: GainSet, steer_gains: GainSet):
        super().__init__(config.name)

        self.config = config
        self._drive = drive
        self._steer = steer
        self._encoder = encoder

        self._drive_config = MotorConfig(gains=drive_gains.copy(),
                                         inverted=DriveConstants.DRIVE_MOTOR_INVERTED,
                                         supply_current_limit=DriveConstants.DRIVE_SUPPLY_LIMIT,
                                         stator_current_limit=DriveConstants.DRIVE_STATOR_LIMIT)

        self._steer_config = MotorConfig(gains=steer_gains.copy(),
                                         inverted=DriveConstants.STEER_MOTOR_INVERTED,
                                         supply_current_limit=DriveConstants.STEER_SUPPLY_LIMIT,
                                         continuous_wrap=True,
                                         remote_sensor_id=config.encoder_id,
                                         rotor_to_sensor_ratio=DriveConstants.STEER_GEAR_RATIO)

        self._drive.apply_configuration(self._drive_config)
        self._steer.apply_configuration(self._steer_config)
        self._drive.set_position(0.0)

        self.inputs = SwerveModuleIO.SwerveModuleIOInputs()
        self.updateInputs(self.inputs)
        self.desired_state = SwerveModuleState(0.0, self.get_angle())

        self._drive_alert = Alert(f"Disconnected drive motor {config.drive_motor_id}", Alert.AlertType.kError)
        self._steer_alert = Alert(f"Disconnected turn motor {config.steer_motor_id}", Alert.AlertType.kError)
        self._encoder_alert = Alert(f"Disconnected CANCoder {config.encoder_id}", Alert.AlertType.kError)

    @property
    def drive_gains(self) -> GainSet:
        return self._drive_config.gains

    @property
    def steer_gains(self) -> GainSet:
        return self._steer_config.gains

    @property
    def alerts(self) -> Tuple[Alert, Alert, Alert]:
        """Drive, steer and encoder disconnect alerts"""
        return self._drive_alert, self._steer_alert, self._encoder_alert

    ###########################################################
    # Unit conversions

    @staticmethod
    def to_motor_velocity(speed: meters_per_second) -> turns_per_second:
        return speed * DriveConstants.DRIVE_GEAR_RATIO / DriveConstants.METERS_PER_REV

    @staticmethod
    def to_wheel_distance(motor_rotations: float) -> meters:
        return motor_rotations / DriveConstants.DRIVE_GEAR_RATIO * DriveConstants.METERS_PER_REV

    ###########################################################
    # Control

    # Measured state comes from the logged inputs so a replayed log drives the same math

    def get_angle(self) -> Rotation2d:
        """Steering angle in (-180, 180] degrees as of the last `periodic`"""
        return Rotation2d.fromDegrees(wrap_degrees(self.inputs.steer_absolute_position * 360.0))

    def set_state(self, desired: SwerveModuleState) -> None:
        """
        Steer and drive toward `desired`. The target is optimized against the last measured
        steering angle so the wheel never steers more than 90 degrees.
        """
        current = self.get_angle()
        state = optimize(desired, current)

        steer_target = state.angle.radians() / RADIANS_PER_REVOLUTION
        drive_target = self.to_motor_velocity(state.speed)

        self._steer.set_position_control(steer_target)
        self._drive.set_velocity_control(drive_target)

        self.desired_state = state

        Logger.recordOutput(f"Drive/Module{self.name}/SetpointSpeed", state.speed)
        Logger.recordOutput(f"Drive/Module{self.name}/SetpointAngle", state.angle.degrees())
        Logger.recordOutput(f"Drive/Module{self.name}/DriveTarget", drive_target)
        Logger.recordOutput(f"Drive/Module{self.name}/SteerTarget", steer_target)

    def get_state(self) -> SwerveModuleState:
        return SwerveModuleState(self.inputs.drive_speed, self.get_angle())

    def get_position(self) -> SwerveModulePosition:
        return SwerveModulePosition(self.inputs.drive_distance, self.get_angle())

    def stop(self) -> None:
        self._steer.stop_motor()
        self._drive.stop_motor()

    def set_gains(self, role: GainRole, gains: GainSet) -> None:
        """
        Push new closed-loop gains to the drive or steer motor
        """
        match role:
            case GainRole.DRIVE:
                self._drive_config.gains = gains.copy()
                self._drive.apply_configuration(self._drive_config)

            case GainRole.STEER:
                self._steer_config.gains = gains.copy()
                self._steer.apply_configuration(self._steer_config)

            case _:
                raise ValueError(f"Unknown gain role: {role}")

        logger.debug(f"{self.name}: {role.value} gains set to {gains}")

    def reset_position(self) -> None:
        """
        Zero the drive distance. The steering angle comes from the absolute encoder
        and is not affected.
        """
        self._drive.set_position(0.0)
        self.inputs.drive_position = 0.0
        self.inputs.drive_distance = 0.0

    def set_brake_mode(self, brake: bool) -> None:
        self._drive.set_brake_mode(brake)
        self._steer.set_brake_mode(brake)

    ###########################################################
    # Periodic / pykit

    def updateInputs(self, inputs: SwerveModuleIO.SwerveModuleIOInputs) -> None:
        for device in (self._drive, self._steer, self._encoder):
            device.refresh()

        inputs.drive_connected = self._drive.is_connected()
        inputs.steer_connected = self._steer.is_connected()
        inputs.encoder_connected = self._encoder.is_connected()

        inputs.drive_position = self._drive.get_position()
        inputs.drive_velocity = self._drive.get_velocity()
        inputs.drive_distance = self.to_wheel_distance(inputs.drive_position)
        inputs.drive_speed = self.to_wheel_distance(inputs.drive_velocity)

        inputs.steer_position = self._steer.get_position()
        inputs.steer_absolute_position = self._encoder.get_absolute_position()

    def periodic(self) -> None:
        """
        Called once per cycle by the drive subsystem, before odometry is updated
        """
        self.updateInputs(self.inputs)
        Logger.processInputs(f"Drive/Module{self.name}", self.inputs)

        self._drive_alert.set(not self.inputs.drive_connected)
        self._steer_alert.set(not self.inputs.steer_connected)
        self._encoder_alert.set(not self.inputs.encoder_connected)

    ###########################################################
    # Simulation support

    def simulation_update(self, dt: seconds) -> None:
        for device in (self._drive, self._steer):
            if isinstance(device, SimActuator):
                device.update(dt)
