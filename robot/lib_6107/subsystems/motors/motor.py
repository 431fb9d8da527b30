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
# Motor controller and absolute encoder capability interfaces. Any vendor device
# that can provide these operations can be used by a swerve module.

from dataclasses import dataclass, field
from typing import Optional

from wpimath.units import amperes, turns, turns_per_second

from lib_6107.util.gains import GainSet


@dataclass
class MotorConfig:
    """
    Everything needed to (re)configure a closed-loop motor controller
    """
    gains: GainSet = field(default_factory=GainSet)
    inverted: bool = False  # False == counter-clockwise positive
    brake: bool = True
    supply_current_limit: Optional[amperes] = None
    stator_current_limit: Optional[amperes] = None

    # Wrap position targets into a single rotation (steering)
    continuous_wrap: bool = False

    # Fused remote sensor. When set, position/velocity are in mechanism rotations
    remote_sensor_id: Optional[int] = None
    rotor_to_sensor_ratio: float = 1.0
    sensor_to_mechanism_ratio: float = 1.0


class Actuator:
    """
    Base class for a closed-loop motor controller. Positions and velocities are
    reported in the units selected by the applied MotorConfig.
    """
    motor_type = "unknown"

    def __init__(self, device_id: int) -> None:
        self._device_id = device_id
        self._config: MotorConfig = MotorConfig()

    @property
    def device_id(self) -> int:
        return self._device_id

    @property
    def config(self) -> MotorConfig:
        return self._config

    def apply_configuration(self, config: MotorConfig) -> None:
        self._config = config

    def set_position_control(self, target: turns) -> None:
        pass

    def set_velocity_control(self, target: turns_per_second) -> None:
        pass

    def stop_motor(self) -> None:
        pass

    def set_brake_mode(self, brake: bool) -> None:
        self._config.brake = brake

    def get_position(self) -> turns:
        return 0.0

    def get_velocity(self) -> turns_per_second:
        return 0.0

    def set_position(self, position: turns) -> None:
        """
        Set the current position reading (zeroes the distance counter when 0)
        """

    def is_connected(self) -> bool:
        return False

    def refresh(self) -> None:
        """
        Update any cached status values. Called once per cycle before they are read.
        """


class AngleSensor:
    """
    Base class for an absolute angle sensor
    """
    sensor_type = "unknown"

    def __init__(self, device_id: int) -> None:
        self._device_id = device_id

    @property
    def device_id(self) -> int:
        return self._device_id

    def get_absolute_position(self) -> turns:
        """
        Absolute position in the range [0, 1)
        """
        return 0.0

    def is_connected(self) -> bool:
        return False

    def refresh(self) -> None:
        pass
