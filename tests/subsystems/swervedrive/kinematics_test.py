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
from wpimath.geometry import Rotation2d, Translation2d
from wpimath.kinematics import ChassisSpeeds, SwerveModulePosition, SwerveModuleState

from subsystems.swervedrive.constants import DriveConstants
from subsystems.swervedrive.kinematics import SwerveKinematics


@pytest.fixture
def kinematics() -> SwerveKinematics:
    return SwerveKinematics(DriveConstants.MODULE_POSITIONS)


def test_module_geometry():
    """
    Modules sit on a 0.3556 m half-width square, front-left first
    """
    offset = DriveConstants.MODULE_OFFSET
    assert offset == pytest.approx(0.3556)

    expected = [(offset, offset), (offset, -offset), (-offset, offset), (-offset, -offset)]
    for location, (x, y) in zip(DriveConstants.MODULE_POSITIONS, expected):
        assert location.x == pytest.approx(x)
        assert location.y == pytest.approx(y)


def test_requires_four_modules():
    with pytest.raises(ValueError):
        SwerveKinematics(DriveConstants.MODULE_POSITIONS[:3])


def test_forward_translation(kinematics):
    states = kinematics.to_module_states(ChassisSpeeds(1.0, 0.0, 0.0))

    for state in states:
        assert state.speed == pytest.approx(1.0)
        assert state.angle.degrees() == pytest.approx(0.0)


@pytest.mark.parametrize("vx, vy", [(1.0, 0.0), (0.0, 2.0), (-1.5, 1.5), (3.0, -0.5)])
def test_translation_only(kinematics, vx, vy):
    direction = math.degrees(math.atan2(vy, vx))
    states = kinematics.to_module_states(ChassisSpeeds(vx, vy, 0.0))

    for state in states:
        assert state.speed == pytest.approx(math.hypot(vx, vy))
        assert state.angle.degrees() == pytest.approx(direction)


def test_pure_rotation(kinematics):
    omega = 1.0
    states = kinematics.to_module_states(ChassisSpeeds(0.0, 0.0, omega))

    for location, state in zip(kinematics.module_locations, states):
        assert abs(state.speed) == pytest.approx(0.503, abs=1e-3)
        assert abs(state.speed) == pytest.approx(omega * 0.3556 * math.sqrt(2))

        # Counter-clockwise: wheel velocity is omega x r
        assert state.speed * state.angle.cos() == pytest.approx(-omega * location.y)
        assert state.speed * state.angle.sin() == pytest.approx(omega * location.x)


@pytest.mark.parametrize("speeds", [
    ChassisSpeeds(1.0, 0.0, 0.0),
    ChassisSpeeds(0.0, 0.0, 2.0),
    ChassisSpeeds(1.2, -0.7, 0.5),
    ChassisSpeeds(-2.0, 1.0, -3.0),
])
def test_round_trip(kinematics, speeds):
    result = kinematics.to_chassis_speeds(kinematics.to_module_states(speeds))

    assert result.vx == pytest.approx(speeds.vx, abs=1e-6)
    assert result.vy == pytest.approx(speeds.vy, abs=1e-6)
    assert result.omega == pytest.approx(speeds.omega, abs=1e-6)


def test_zero_speed_holds_last_heading(kinematics):
    kinematics.to_module_states(ChassisSpeeds(0.0, 1.0, 0.0))

    states = kinematics.to_module_states(ChassisSpeeds())

    for state in states:
        assert state.speed == 0.0
        assert state.angle.degrees() == pytest.approx(90.0)


def test_zero_speed_before_any_motion_points_forward(kinematics):
    for state in kinematics.to_module_states(ChassisSpeeds()):
        assert state.speed == 0.0
        assert state.angle.degrees() == pytest.approx(0.0)


def test_desaturate_keeps_ratios():
    states = [SwerveModuleState(10.0, Rotation2d()), SwerveModuleState(5.0, Rotation2d()),
              SwerveModuleState(-2.5, Rotation2d()), SwerveModuleState(0.0, Rotation2d())]

    result = SwerveKinematics.desaturate(states, 5.0)

    assert [state.speed for state in result] == pytest.approx([5.0, 2.5, -1.25, 0.0])


def test_x_formation_wheels_along_radius(kinematics):
    states = kinematics.x_formation()
    expected = [45.0, -45.0, 135.0, -135.0]

    for state, angle in zip(states, expected):
        assert state.speed == 0.0
        assert state.angle.degrees() == pytest.approx(angle)


def test_zero_speed_after_x_formation_keeps_the_x(kinematics):
    kinematics.to_module_states(ChassisSpeeds(1.0, 0.0, 0.0))
    kinematics.x_formation()

    states = kinematics.to_module_states(ChassisSpeeds())

    for state, angle in zip(states, [45.0, -45.0, 135.0, -135.0]):
        assert state.speed == 0.0
        assert state.angle.degrees() == pytest.approx(angle)

    # Moving again releases the hold
    for state in kinematics.to_module_states(ChassisSpeeds(1.0, 0.0, 0.0)):
        assert state.angle.degrees() == pytest.approx(0.0)


def test_twist_from_positions(kinematics):
    start = [SwerveModulePosition(0.0, Rotation2d()) for _ in range(4)]
    end = [SwerveModulePosition(0.5, Rotation2d()) for _ in range(4)]

    twist = kinematics.to_twist(start, end)

    assert twist.dx == pytest.approx(0.5)
    assert twist.dy == pytest.approx(0.0)
    assert twist.dtheta == pytest.approx(0.0)


def test_locations_are_kept():
    locations = [Translation2d(1, 1), Translation2d(1, -1), Translation2d(-1, 1), Translation2d(-1, -1)]
    assert SwerveKinematics(locations).module_locations == tuple(locations)
