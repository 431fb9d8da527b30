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

import pytest

from lib_6107.subsystems.gyro.gyro import Gyro
from lib_6107.subsystems.gyro.simgyro import SimGyro


def test_create_sim():
    gyro = Gyro.create("Sim", 16)

    assert isinstance(gyro, SimGyro)
    assert gyro.device_id == 16
    assert not gyro.is_reversed


def test_create_unknown_type():
    with pytest.raises(ValueError):
        Gyro.create("NavX", 16)


def test_heading_follows_yaw():
    gyro = SimGyro(16)
    gyro.sim_yaw = 30.0

    assert gyro.yaw == pytest.approx(30.0)
    assert gyro.heading.degrees() == pytest.approx(30.0)

    gyro.reset()
    assert gyro.yaw == 0.0


def test_reversed():
    gyro = SimGyro(16, is_reversed=True)
    gyro.sim_yaw = 30.0

    # Simulation sets the robot yaw, the reversal applies to the raw device value only
    assert gyro.yaw == pytest.approx(30.0)
    assert gyro._raw_yaw == pytest.approx(-30.0)


def test_inputs_and_alert():
    gyro = SimGyro(16)
    inputs = Gyro.GyroIOInputs()
    gyro.sim_yaw = 90.0

    gyro.periodic(inputs)
    assert inputs.connected
    assert inputs.yaw == pytest.approx(math.pi / 2)
    assert not gyro._disconnected_alert.get()

    gyro.connected = False
    gyro.periodic(inputs)
    assert not inputs.connected
    assert gyro._disconnected_alert.get()
    assert gyro._disconnected_alert.getText() == "Disconnected gyro 16"

    # A disconnected gyro stops following the simulation
    gyro.sim_yaw = 10.0
    assert gyro.yaw == pytest.approx(90.0)
