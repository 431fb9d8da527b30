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

import pytest
from wpimath.geometry import Rotation2d
from wpimath.kinematics import SwerveModuleState

from lib_6107.subsystems.motors.sim import ControlMode, SimActuator, SimAngleSensor
from lib_6107.util.gains import GainRole, GainSet
from subsystems.swervedrive.constants import DriveConstants
from subsystems.swervedrive.swervemodule import create_devices, SwerveModule


@pytest.fixture
def devices():
    return create_devices(DriveConstants.MODULE_CONFIGS[0], simulation=True)


@pytest.fixture
def module(devices) -> SwerveModule:
    return SwerveModule(DriveConstants.MODULE_CONFIGS[0], *devices,
                        DriveConstants.DRIVE_GAINS, DriveConstants.STEER_GAINS)


def test_devices_are_configured(devices, module):
    drive, steer, encoder = devices

    assert isinstance(drive, SimActuator)
    assert isinstance(encoder, SimAngleSensor)

    assert drive.config.gains == DriveConstants.DRIVE_GAINS
    assert drive.config.supply_current_limit == DriveConstants.DRIVE_SUPPLY_LIMIT
    assert drive.config.stator_current_limit == DriveConstants.DRIVE_STATOR_LIMIT

    assert steer.config.gains == DriveConstants.STEER_GAINS
    assert steer.config.continuous_wrap
    assert steer.config.remote_sensor_id == DriveConstants.MODULE_CONFIGS[0].encoder_id
    assert steer.config.rotor_to_sensor_ratio == pytest.approx(DriveConstants.STEER_GEAR_RATIO)


def test_set_and_get_state(module):
    module.set_state(SwerveModuleState(2.0, Rotation2d.fromDegrees(45)))
    module.periodic()

    state = module.get_state()
    assert state.speed == pytest.approx(2.0)
    assert state.angle.degrees() == pytest.approx(45.0)


def test_angle_is_wrapped(module):
    module.set_state(SwerveModuleState(1.0, Rotation2d.fromDegrees(-60)))
    module.periodic()

    # The encoder reports 300 degrees worth of rotation
    assert module.inputs.steer_absolute_position == pytest.approx(300.0 / 360.0)
    assert module.get_angle().degrees() == pytest.approx(-60.0)


def test_measured_state_comes_from_inputs(module):
    module.periodic()

    # Values written by a log replay replace what the devices reported
    module.inputs.drive_distance = 3.2
    module.inputs.drive_speed = 1.5
    module.inputs.steer_absolute_position = 0.25

    position = module.get_position()
    assert position.distance == pytest.approx(3.2)
    assert position.angle.degrees() == pytest.approx(90.0)

    state = module.get_state()
    assert state.speed == pytest.approx(1.5)
    assert state.angle.degrees() == pytest.approx(90.0)


def test_drive_units(devices, module):
    drive, _, _ = devices

    module.set_state(SwerveModuleState(1.0, Rotation2d()))

    # One meter per second of wheel travel in motor rotor rotations per second
    expected = DriveConstants.DRIVE_GEAR_RATIO / DriveConstants.METERS_PER_REV
    assert drive.velocity_target == pytest.approx(expected)


def test_set_state_optimizes_against_current_angle(devices, module):
    _, steer, _ = devices

    # Walk the wheel around to 170 degrees without triggering a flip
    module.set_state(SwerveModuleState(0.1, Rotation2d.fromDegrees(90)))
    module.periodic()
    module.set_state(SwerveModuleState(0.1, Rotation2d.fromDegrees(170)))
    module.periodic()
    assert module.get_state().angle.degrees() == pytest.approx(170.0)

    module.set_state(SwerveModuleState(1.0, Rotation2d.fromDegrees(0)))

    assert abs(module.desired_state.angle.degrees()) == pytest.approx(180.0)
    assert module.desired_state.speed == pytest.approx(-1.0)
    assert abs(steer.position_target) == pytest.approx(0.5)

    module.periodic()
    state = module.get_state()
    assert abs(state.angle.degrees()) == pytest.approx(180.0)
    assert state.speed == pytest.approx(-1.0)


def test_reset_position(devices, module):
    drive, _, _ = devices

    module.set_state(SwerveModuleState(1.0, Rotation2d.fromDegrees(30)))
    drive.update(0.5)
    module.periodic()
    assert module.get_position().distance == pytest.approx(0.5)

    module.reset_position()

    position = module.get_position()
    assert position.distance == 0.0
    assert position.angle.degrees() == pytest.approx(30.0)

    module.periodic()
    assert module.get_position().distance == 0.0


def test_stop(devices, module):
    drive, _, _ = devices

    module.set_state(SwerveModuleState(3.0, Rotation2d()))
    module.stop()
    module.periodic()

    assert drive.mode == ControlMode.NEUTRAL
    assert module.get_state().speed == 0.0


def test_set_gains(devices, module):
    drive, steer, _ = devices
    applied = drive.configurations_applied

    new_gains = GainSet(1.0, 2.0, 3.0, 4.0)
    module.set_gains(GainRole.DRIVE, new_gains)

    assert drive.configurations_applied == applied + 1
    assert drive.config.gains == new_gains
    assert module.drive_gains == new_gains
    assert module.steer_gains == DriveConstants.STEER_GAINS

    # The module keeps its own copy
    new_gains.p = 100.0
    assert module.drive_gains.p == 1.0

    module.set_gains(GainRole.STEER, GainSet(9.0))
    assert steer.config.gains.p == 9.0


def test_set_gains_bad_role(module):
    with pytest.raises(ValueError):
        module.set_gains("Shooter", GainSet())


def test_disconnect_raises_alerts_only(devices, module):
    drive, steer, encoder = devices
    drive_alert, steer_alert, encoder_alert = module.alerts

    module.periodic()
    assert not drive_alert.get()
    assert not steer_alert.get()
    assert not encoder_alert.get()

    drive.connected = False
    encoder.connected = False
    module.periodic()

    assert drive_alert.get()
    assert not steer_alert.get()
    assert encoder_alert.get()
    assert not module.inputs.drive_connected

    # Degraded control continues without raising
    module.set_state(SwerveModuleState(1.0, Rotation2d.fromDegrees(20)))
    module.stop()

    drive.connected = True
    encoder.connected = True
    module.periodic()
    assert not drive_alert.get()
    assert not encoder_alert.get()


def test_alert_text(module):
    config = DriveConstants.MODULE_CONFIGS[0]
    drive_alert, steer_alert, encoder_alert = module.alerts

    assert drive_alert.getText() == f"Disconnected drive motor {config.drive_motor_id}"
    assert steer_alert.getText() == f"Disconnected turn motor {config.steer_motor_id}"
    assert encoder_alert.getText() == f"Disconnected CANCoder {config.encoder_id}"
