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

from types import SimpleNamespace

import pytest
from commands2 import CommandScheduler
from wpilib import Field2d

from commands.swervedrive.pad_drive import PadDrive
from lib_6107.subsystems.gyro.simgyro import SimGyro
from lib_6107.subsystems.motors.sim import SimActuator
from lib_6107.util.gains import GainMode
from robotcontainer import RobotContainer


@pytest.fixture
def container() -> RobotContainer:
    robot = SimpleNamespace(field=Field2d())
    yield RobotContainer(robot)
    CommandScheduler.resetInstance()


def test_container_builds_simulated_robot(container):
    drive = container.robot_drive

    assert container.simulation
    assert container.subsystems == [drive]
    assert isinstance(container.gyro, SimGyro)
    assert drive.gyro is container.gyro
    assert len(drive.modules) == 4

    for module in drive.modules:
        assert isinstance(module._drive, SimActuator)
        assert isinstance(module._steer, SimActuator)


def test_default_command_is_pad_drive(container):
    assert isinstance(container.robot_drive.getDefaultCommand(), PadDrive)


def test_drive_owns_the_container_gains(container):
    drive = container.robot_drive

    assert drive.gains is container.gains
    assert drive.gain_mode == GainMode.AUTONOMOUS


def test_toggle_field_oriented(container):
    initial = container.robot_drive.field_oriented

    container.toggle_field_oriented()
    assert container.robot_drive.field_oriented != initial

    container.toggle_field_oriented()
    assert container.robot_drive.field_oriented == initial


def test_do_nothing_auto(container):
    command = container.get_autonomous_command()
    assert command is not None

    container.robot_drive.set_drive_speeds(1.0, 0.0, 0.0, field_oriented=False)
    command.initialize()
    container.robot_drive.periodic()

    for state in container.robot_drive.get_module_states():
        assert state.speed == 0.0
