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
# Ideal simulated motor and encoder. Commands are honored immediately, which is
# enough for robot simulation and for unit tests of the code that drives them.

import logging
from enum import Enum
from typing import Optional

from wpimath.units import turns, turns_per_second, seconds

from lib_6107.subsystems.motors.motor import Actuator, AngleSensor, MotorConfig

logger = logging.getLogger(__name__)


class ControlMode(Enum):
    NEUTRAL = 0
    POSITION = 1
    VELOCITY = 2


class SimActuator(Actuator):
    """
    Simulated closed-loop motor controller. Position control jumps straight to
    the target, velocity control is integrated by `update()`.
    """
    motor_type = "Sim"

    def __init__(self, device_id: int) -> None:
        super().__init__(device_id)

        self.connected = True
        self.mode = ControlMode.NEUTRAL
        self.position_target: Optional[turns] = None
        self.velocity_target: Optional[turns_per_second] = None
        self.configurations_applied = 0

        self._position: turns = 0.0
        self._velocity: turns_per_second = 0.0

    def apply_configuration(self, config: MotorConfig) -> None:
        if not self.connected:
            return

        super().apply_configuration(config)
        self.configurations_applied += 1

    def set_position_control(self, target: turns) -> None:
        if not self.connected:
            return

        self.mode = ControlMode.POSITION
        self.position_target = target
        self._position = target
        self._velocity = 0.0

    def set_velocity_control(self, target: turns_per_second) -> None:
        if not self.connected:
            return

        self.mode = ControlMode.VELOCITY
        self.velocity_target = target
        self._velocity = target

    def stop_motor(self) -> None:
        if not self.connected:
            return

        self.mode = ControlMode.NEUTRAL
        self._velocity = 0.0

    def set_position(self, position: turns) -> None:
        if self.connected:
            self._position = position

    def get_position(self) -> turns:
        return self._position

    def get_velocity(self) -> turns_per_second:
        return self._velocity

    def is_connected(self) -> bool:
        return self.connected

    def update(self, dt: seconds) -> None:
        if self.mode == ControlMode.VELOCITY:
            self._position += self._velocity * dt


class SimAngleSensor(AngleSensor):
    """
    Simulated absolute encoder. If it is mounted on a simulated steer motor, it follows
    that motor's mechanism position.
    """
    sensor_type = "Sim"

    def __init__(self, device_id: int, actuator: Optional[SimActuator] = None) -> None:
        super().__init__(device_id)

        self.connected = True
        self._actuator = actuator
        self._position: turns = 0.0

    def set_absolute_position(self, position: turns) -> None:
        self._position = position
        if self._actuator is not None:
            self._actuator.set_position(position)

    def get_absolute_position(self) -> turns:
        if self._actuator is not None and self.connected:
            self._position = self._actuator.get_position()

        return self._position % 1.0

    def is_connected(self) -> bool:
        return self.connected
