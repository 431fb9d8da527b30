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

from typing import List

import hal
import pytest
from ntcore import NetworkTableInstance

from lib_6107.subsystems.gyro.simgyro import SimGyro
from lib_6107.util.gains import DriveGains
from subsystems.swervedrive.constants import DriveConstants
from subsystems.swervedrive.drivesubsystem import DriveSubsystem
from subsystems.swervedrive.swervemodule import create_devices, SwerveModule


@pytest.fixture(scope="session", autouse=True)
def hal_initialized() -> None:
    assert hal.initialize(500, 0), "HAL simulation failed to initialize"


@pytest.fixture
def gains() -> DriveGains:
    return DriveGains.from_defaults(DriveConstants.DRIVE_GAINS, DriveConstants.STEER_GAINS)


@pytest.fixture
def modules(gains: DriveGains) -> List[SwerveModule]:
    """Four swerve modules on simulated motors, in front-left, front-right, back-left, back-right order"""
    return [SwerveModule(config, *create_devices(config, simulation=True),
                         gains.autonomous.drive, gains.autonomous.steer)
            for config in DriveConstants.MODULE_CONFIGS]


@pytest.fixture
def gyro() -> SimGyro:
    sim_gyro = SimGyro(16)
    sim_gyro.initialize()
    return sim_gyro


@pytest.fixture
def drive(modules: List[SwerveModule], gyro: SimGyro, gains: DriveGains) -> DriveSubsystem:
    return DriveSubsystem(modules, gyro, gains)


@pytest.fixture
def nt_instance() -> NetworkTableInstance:
    """A private NetworkTables instance so tuning values do not leak between tests"""
    inst = NetworkTableInstance.create()
    yield inst
    NetworkTableInstance.destroy(inst)


@pytest.fixture
def step():
    def run(drive: DriveSubsystem, seconds: float, dt: float = 0.02) -> None:
        """
        Run the drive for `seconds`, periodic first and then physics as the robot
        loop does, with a last periodic so odometry sees the final physics step
        """
        for _ in range(round(seconds / dt)):
            drive.periodic()
            drive.simulationPeriodic(now=0.0, tm_diff=dt)

        drive.periodic()

    return run
