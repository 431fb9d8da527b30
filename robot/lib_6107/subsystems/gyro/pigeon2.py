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

from phoenix6 import BaseStatusSignal, StatusCode, StatusSignal
from phoenix6.configs import Pigeon2Configuration
from phoenix6.hardware import pigeon2
from phoenix6.sim.pigeon2_sim_state import Pigeon2SimState
from wpilib import SmartDashboard
from wpimath.units import degrees, degrees_per_second, hertz

from lib_6107.subsystems.gyro.gyro import Gyro
from lib_6107.subsystems.motors.talonfx import CONFIG_RETRIES, try_until_ok
from lib_6107.util.phoenix6_signals import Phoenix6Signals

logger = logging.getLogger(__name__)


class Pigeon2(Gyro):
    """
    Pigeon2 gyro implementation
    """
    gyro_type = "Pigeon2"

    def __init__(self, device_id: int, is_reversed: bool, update_frequency: hertz, canbus: str = "") -> None:
        super().__init__(device_id, is_reversed)

        self._gyro = pigeon2.Pigeon2(device_id, canbus)
        self._sim_gyro_state: Pigeon2SimState = self._gyro.sim_state

        # Note: Default pigeon2 config has compass disabled. We want it that way as well.
        config: Pigeon2Configuration = Pigeon2Configuration()
        config.pigeon2_features.enable_compass = False

        status = try_until_ok(CONFIG_RETRIES, lambda: self._gyro.configurator.apply(config, timeout_seconds=0.2))
        if not status.is_ok():
            logger.warning(f"{self.gyro_type}: configuration failed: {status}")

        self._update_hz: hertz = update_frequency

        self._yaw: StatusSignal = self._gyro.get_yaw()
        self._yaw_velocity: StatusSignal = self._gyro.get_angular_velocity_z_world()
        self._connected = False

    def initialize(self) -> None:
        """
        Perform initial steps to get your gyro ready
        """
        self.reset()

        if self._update_hz > 0.0:
            status = BaseStatusSignal.set_update_frequency_for_all(self._update_hz,
                                                                   self._yaw,
                                                                   self._yaw_velocity)
            if status != StatusCode.OK:
                logger.warning(f"{self.gyro_type}: Error during gyro frequency update: {status}")

        Phoenix6Signals.register_signals(self._yaw, self._yaw_velocity)

    def is_connected(self) -> bool:
        return self._connected

    def reset(self) -> None:
        """
        Reset the gyro. We boot up at zero degrees. Note that you can't reset this while calibrating.
        """
        self._gyro.set_yaw(0.0)

    @property
    def yaw(self) -> degrees:
        yaw = self._yaw.value_as_double
        return -yaw if self._reversed else yaw

    @property
    def turn_rate_degrees_per_second(self) -> degrees_per_second:
        rate = self._yaw_velocity.value_as_double
        return -rate if self._reversed else rate

    def updateInputs(self, inputs: Gyro.GyroIOInputs) -> None:
        self._connected = StatusSignal.is_all_good(self._yaw, self._yaw_velocity)
        super().updateInputs(inputs)

    ########################################################################################
    # SmartDashboard support

    def dashboard_periodic(self) -> None:
        """
        Called from periodic function to update dashboard elements for this subsystem
        """
        super().dashboard_periodic()

        SmartDashboard.putNumber('Gyro/pitch', self._gyro.get_pitch().value)
        SmartDashboard.putNumber('Gyro/roll', self._gyro.get_roll().value)

    ########################################################################################
    # Simulation support

    @property
    def sim_yaw(self) -> degrees:
        return self.yaw

    @sim_yaw.setter
    def sim_yaw(self, value: degrees) -> None:
        if self._reversed:
            value = -value

        self._sim_gyro_state.set_raw_yaw(value)
