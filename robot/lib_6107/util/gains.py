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
# Closed-loop gain bundles used by the drive motors

import copy
from dataclasses import dataclass, field
from enum import Enum


class GainRole(Enum):
    """Which actuator of a swerve module a gain set belongs to"""
    DRIVE = "Drive"
    STEER = "Steer"


class GainMode(Enum):
    """Operating mode a gain profile is used in"""
    TELEOP = "Teleop"
    AUTONOMOUS = "Autonomous"


@dataclass
class GainSet:
    """
    Proportional, integral, derivative and velocity feedforward coefficients
    for one motor's closed-loop controller.

    Instances are shared by reference between the profile that owns them and the
    tuning bridge, so changes go through `update()` rather than by replacing the
    object.
    """
    p: float = 0.0
    i: float = 0.0
    d: float = 0.0
    v: float = 0.0

    def update(self, p: float, i: float, d: float, v: float) -> bool:
        """
        Copy in new coefficients.

        :returns: True if any coefficient changed
        """
        changed = (p, i, d, v) != (self.p, self.i, self.d, self.v)
        self.p, self.i, self.d, self.v = p, i, d, v
        return changed

    def copy(self) -> 'GainSet':
        return copy.copy(self)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return self.p, self.i, self.d, self.v

    def __str__(self) -> str:
        return f"P: {self.p}, I: {self.i}, D: {self.d}, V: {self.v}"


@dataclass
class GainProfile:
    """The drive and steer gains used together in one operating mode"""
    drive: GainSet = field(default_factory=GainSet)
    steer: GainSet = field(default_factory=GainSet)

    def get(self, role: GainRole) -> GainSet:
        match role:
            case GainRole.DRIVE:
                return self.drive
            case GainRole.STEER:
                return self.steer

        raise ValueError(f"Unknown gain role: {role}")

    def copy(self) -> 'GainProfile':
        return GainProfile(self.drive.copy(), self.steer.copy())


@dataclass
class DriveGains:
    """
    Teleop and autonomous gain profiles for the whole drivetrain. Created once at start
    up from the static defaults and owned by the drive subsystem.
    """
    teleop: GainProfile
    autonomous: GainProfile

    def profile(self, mode: GainMode) -> GainProfile:
        match mode:
            case GainMode.TELEOP:
                return self.teleop
            case GainMode.AUTONOMOUS:
                return self.autonomous

        raise ValueError(f"Unknown gain mode: {mode}")

    @classmethod
    def from_defaults(cls, drive: GainSet, steer: GainSet) -> 'DriveGains':
        """
        Both profiles start out as independent copies of the same defaults
        """
        return cls(teleop=GainProfile(drive.copy(), steer.copy()),
                   autonomous=GainProfile(drive.copy(), steer.copy()))
