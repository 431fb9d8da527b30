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

from commands.swervedrive.pad_drive import PadDrive
from constants import MAX_ANGULAR_SPEED, MAX_SPEED, ROTATION_SCALE


def test_stick_up_drives_forward():
    forward, strafe = PadDrive.position_set(0.0, -1.0)

    assert forward == pytest.approx(MAX_SPEED)
    assert strafe == 0.0


def test_stick_left_strafes_left():
    forward, strafe = PadDrive.position_set(-0.5, 0.0)

    assert forward == 0.0
    assert strafe == pytest.approx(0.5 * MAX_SPEED)


def test_translation_deadzone():
    # 0.015 * 5.76 is below the 0.1 m/s dead zone, 0.02 * 5.76 is above it
    assert PadDrive.position_set(0.015, -0.015) == (0.0, 0.0)

    forward, strafe = PadDrive.position_set(0.02, -0.02)
    assert forward == pytest.approx(0.02 * MAX_SPEED)
    assert strafe == pytest.approx(-0.02 * MAX_SPEED)


@pytest.mark.parametrize("right_x, expected", [
    (0.0, 0.0),
    (0.19, 0.0),
    (-0.19, 0.0),
    (0.2, -0.2 * MAX_ANGULAR_SPEED * ROTATION_SCALE),
    (-1.0, MAX_ANGULAR_SPEED * ROTATION_SCALE),
])
def test_rotation(right_x, expected):
    assert PadDrive.rotation_set(right_x) == pytest.approx(expected)


def test_execute_drives_each_cycle(recording_drive):
    sticks = {"lx": 0.0, "ly": -0.5, "rx": 0.0}
    command = PadDrive(recording_drive, lambda: sticks["lx"], lambda: sticks["ly"], lambda: sticks["rx"])

    command.initialize()
    command.execute()

    sticks["rx"] = 1.0
    command.execute()

    assert len(recording_drive.speeds) == 2

    forward, strafe, rotate, field_oriented = recording_drive.speeds[0]
    assert forward == pytest.approx(0.5 * MAX_SPEED)
    assert strafe == 0.0
    assert rotate == 0.0
    assert field_oriented

    assert recording_drive.speeds[1][2] == pytest.approx(-MAX_ANGULAR_SPEED * ROTATION_SCALE)
    assert not command.isFinished()


def test_field_oriented_follows_drivetrain(recording_drive):
    command = PadDrive(recording_drive, lambda: 0.0, lambda: 0.0, lambda: 0.0)

    recording_drive.field_oriented = False
    command.execute()

    assert recording_drive.speeds[-1] == (0.0, 0.0, 0.0, False)


def test_field_oriented_override(recording_drive):
    command = PadDrive(recording_drive, lambda: 0.0, lambda: 0.0, lambda: 0.0, field_oriented=lambda: False)
    command.execute()

    assert not recording_drive.speeds[-1][3]


def test_requires_drivetrain(recording_drive):
    command = PadDrive(recording_drive, lambda: 0.0, lambda: 0.0, lambda: 0.0)

    assert recording_drive in command.getRequirements()
