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
#
# CTRE Phoenix 6 implementations of the motor / encoder capability interfaces

import logging
from typing import Callable

from phoenix6 import BaseStatusSignal, StatusCode, StatusSignal
from phoenix6.configs import CANcoderConfiguration, TalonFXConfiguration
from phoenix6.controls import NeutralOut, PositionTorqueCurrentFOC, VelocityTorqueCurrentFOC
from phoenix6.hardware import CANcoder, TalonFX
from phoenix6.signals import FeedbackSensorSourceValue, InvertedValue, NeutralModeValue, SensorDirectionValue
from wpimath.units import turns, turns_per_second

from lib_6107.subsystems.motors.motor import Actuator, AngleSensor, MotorConfig
from lib_6107.util.phoenix6_signals import Phoenix6Signals

logger = logging.getLogger(__name__)

CONFIG_RETRIES = 5
CONFIG_TIMEOUT = 0.25  # seconds


def try_until_ok(attempts: int, command: Callable[[], StatusCode]) -> StatusCode:
    """
    Retry a device configuration call until it reports OK. The last status is
    returned so the caller can decide how loud to be about it.
    """
    status = StatusCode.OK
    for _ in range(attempts):
        status = command()
        if status.is_ok():
            break

    return status


class TalonFXActuator(Actuator):
    """
    TalonFX (Kraken/Falcon) with torque-current FOC closed loop control
    """
    motor_type = "TalonFX"

    def __init__(self, device_id: int, canbus: str = "") -> None:
        super().__init__(device_id)

        self._talon = TalonFX(device_id, canbus)
        self._talon_config = TalonFXConfiguration()

        self._position_request = PositionTorqueCurrentFOC(0)
        self._velocity_request = VelocityTorqueCurrentFOC(0)
        self._neutral_request = NeutralOut()

        self._position: StatusSignal = self._talon.get_position()
        self._velocity: StatusSignal = self._talon.get_velocity()
        self._connected = False

        Phoenix6Signals.register_signals(self._position, self._velocity)

    def apply_configuration(self, config: MotorConfig) -> None:
        super().apply_configuration(config)

        cfg = self._talon_config
        cfg.slot0.k_p = config.gains.p
        cfg.slot0.k_i = config.gains.i
        cfg.slot0.k_d = config.gains.d
        cfg.slot0.k_v = config.gains.v

        cfg.motor_output.neutral_mode = NeutralModeValue.BRAKE if config.brake else NeutralModeValue.COAST
        cfg.motor_output.inverted = InvertedValue.CLOCKWISE_POSITIVE if config.inverted \
            else InvertedValue.COUNTER_CLOCKWISE_POSITIVE

        if config.supply_current_limit is not None:
            cfg.current_limits.supply_current_limit = config.supply_current_limit
            cfg.current_limits.supply_current_limit_enable = True

        if config.stator_current_limit is not None:
            cfg.current_limits.stator_current_limit = config.stator_current_limit
            cfg.current_limits.stator_current_limit_enable = True

        if config.remote_sensor_id is not None:
            cfg.feedback.feedback_remote_sensor_id = config.remote_sensor_id
            cfg.feedback.feedback_sensor_source = FeedbackSensorSourceValue.FUSED_CANCODER
            cfg.feedback.rotor_to_sensor_ratio = config.rotor_to_sensor_ratio

        cfg.feedback.sensor_to_mechanism_ratio = config.sensor_to_mechanism_ratio
        cfg.closed_loop_general.continuous_wrap = config.continuous_wrap

        self._apply()

    def _apply(self) -> None:
        status = try_until_ok(CONFIG_RETRIES, lambda: self._talon.configurator.apply(self._talon_config,
                                                                                      CONFIG_TIMEOUT))
        if not status.is_ok():
            logger.warning(f"{self.motor_type} {self.device_id}: configuration failed: {status}")

    def set_position_control(self, target: turns) -> None:
        self._talon.set_control(self._position_request.with_position(target))

    def set_velocity_control(self, target: turns_per_second) -> None:
        self._talon.set_control(self._velocity_request.with_velocity(target))

    def stop_motor(self) -> None:
        self._talon.set_control(self._neutral_request)

    def set_brake_mode(self, brake: bool) -> None:
        super().set_brake_mode(brake)
        self._talon_config.motor_output.neutral_mode = NeutralModeValue.BRAKE if brake else NeutralModeValue.COAST
        self._apply()

    def set_position(self, position: turns) -> None:
        try_until_ok(CONFIG_RETRIES, lambda: self._talon.set_position(position, CONFIG_TIMEOUT))

    def refresh(self) -> None:
        # Signals are refreshed in one batch by Phoenix6Signals.refresh()
        self._connected = BaseStatusSignal.is_all_good(self._position, self._velocity)

    def get_position(self) -> turns:
        return self._position.value_as_double

    def get_velocity(self) -> turns_per_second:
        return self._velocity.value_as_double

    def is_connected(self) -> bool:
        return self._connected


class CANcoderSensor(AngleSensor):
    """
    CANcoder absolute encoder, reporting [0, 1) rotations with counter-clockwise positive
    """
    sensor_type = "CANcoder"

    def __init__(self, device_id: int, magnet_offset: turns, canbus: str = "") -> None:
        super().__init__(device_id)

        self._cancoder = CANcoder(device_id, canbus)

        config = CANcoderConfiguration()
        config.magnet_sensor.with_absolute_sensor_discontinuity_point(1.0) \
            .with_magnet_offset(magnet_offset) \
            .with_sensor_direction(SensorDirectionValue.COUNTER_CLOCKWISE_POSITIVE)

        status = try_until_ok(CONFIG_RETRIES, lambda: self._cancoder.configurator.apply(config, CONFIG_TIMEOUT))
        if not status.is_ok():
            logger.warning(f"{self.sensor_type} {device_id}: configuration failed: {status}")

        self._absolute_position: StatusSignal = self._cancoder.get_absolute_position()
        self._connected = False

        Phoenix6Signals.register_signal(self._absolute_position)

    def refresh(self) -> None:
        self._connected = BaseStatusSignal.is_all_good(self._absolute_position)

    def get_absolute_position(self) -> turns:
        return self._absolute_position.value_as_double % 1.0

    def is_connected(self) -> bool:
        return self._connected
