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

from wpimath.units import degrees, degrees_per_second

from lib_6107.subsystems.gyro.gyro import Gyro


class SimGyro(Gyro):
    """
    Simulated gyro. The yaw is set by the physics step (or by a test) through `sim_yaw`.
    """
    gyro_type = "Sim"

    def __init__(self, device_id: int, is_reversed: bool = False) -> None:
        super().__init__(device_id, is_reversed)

        self.connected = True
        self._raw_yaw: degrees = 0.0

    def is_connected(self) -> bool:
        return self.connected

    def reset(self) -> None:
        self._raw_yaw = 0.0

    @property
    def yaw(self) -> degrees:
        return -self._raw_yaw if self._reversed else self._raw_yaw

    @property
    def turn_rate_degrees_per_second(self) -> degrees_per_second:
        return 0.0

    @property
    def sim_yaw(self) -> degrees:
        return self.yaw

    @sim_yaw.setter
    def sim_yaw(self, value: degrees) -> None:
        if not self.connected:
            return

        self._raw_yaw = -value if self._reversed else value
