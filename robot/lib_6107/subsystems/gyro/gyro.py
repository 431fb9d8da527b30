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

import math

from wpilib import Alert, SmartDashboard
from wpimath.geometry import Rotation2d
from wpimath.units import degrees, degrees_per_second, hertz

from lib_6107.subsystems.pykit.gyro_io import GyroIO


class Gyro(GyroIO):
    """
    Gyro is the base class for gyros on our system. Actual gyros are derived
    from this class.
    """
    gyro_type = "unknown"

    def __init__(self, device_id: int, is_reversed: bool) -> None:
        super().__init__()

        self._device_id = device_id
        self._reversed = is_reversed
        self._disconnected_alert = Alert(f"Disconnected gyro {device_id}", Alert.AlertType.kError)

    @staticmethod
    def create(gyro_type: str, device_id: int, is_reversed: bool = False,
               update_frequency: hertz = 0.0) -> 'Gyro':
        """
        Construct the gyro named by `gyro_type`. An unknown type is a configuration
        mistake and stops start up.
        """
        match gyro_type:
            case "Pigeon2":
                from lib_6107.subsystems.gyro.pigeon2 import Pigeon2
                return Pigeon2(device_id, is_reversed, update_frequency)

            case "Sim":
                from lib_6107.subsystems.gyro.simgyro import SimGyro
                return SimGyro(device_id, is_reversed)

        raise ValueError(f"Unsupported gyro type: {gyro_type}")

    def initialize(self) -> None:
        """
        Perform initial steps to get your gyro ready
        """
        self.reset()

    @property
    def device_id(self) -> int:
        return self._device_id

    @property
    def is_reversed(self) -> bool:
        return self._reversed

    def is_connected(self) -> bool:
        raise NotImplementedError("Implement in derived class")

    def reset(self) -> None:
        """
        Zero the heading
        """
        raise NotImplementedError("Implement in derived class")

    @property
    def yaw(self) -> degrees:
        """
        Counter-clockwise positive yaw, with the reversal already applied
        """
        raise NotImplementedError("Implement in derived class")

    @property
    def heading(self) -> Rotation2d:
        """
        Returns the heading of the robot
        """
        return Rotation2d.fromDegrees(self.yaw)

    @property
    def turn_rate(self) -> float:
        """Returns the turn rate of the robot (in radians per second)

        :returns: The turn rate of the robot, in radians per second
        """
        return math.radians(self.turn_rate_degrees_per_second)

    @property
    def turn_rate_degrees_per_second(self) -> degrees_per_second:
        raise NotImplementedError("Implement in derived class")

    def periodic(self, inputs: GyroIO.GyroIOInputs) -> None:
        """
        Perform any periodic maintenance
        """
        self.updateInputs(inputs)
        self._disconnected_alert.set(not inputs.connected)

    def updateInputs(self, inputs: GyroIO.GyroIOInputs) -> None:
        inputs.connected = self.is_connected()
        inputs.yaw = math.radians(self.yaw)
        inputs.yaw_rate = self.turn_rate

    ######################
    # SmartDashboard support

    def dashboard_initialize(self) -> None:
        SmartDashboard.putString('Gyro/type', self.gyro_type)

    def dashboard_periodic(self) -> None:
        """
        Called from periodic function to update dashboard elements for this subsystem
        """
        SmartDashboard.putNumber('Gyro/yaw', self.yaw)
        SmartDashboard.putNumber('Gyro/rate', self.turn_rate_degrees_per_second)
        SmartDashboard.putBoolean('Gyro/connected', self.is_connected())

    ######################
    # Simulation support

    @property
    def sim_yaw(self) -> degrees:
        raise NotImplementedError("Implement in derived class")

    @sim_yaw.setter
    def sim_yaw(self, value: degrees) -> None:
        """
        Used during simulation
        """
        raise NotImplementedError("Implement in derived class")
