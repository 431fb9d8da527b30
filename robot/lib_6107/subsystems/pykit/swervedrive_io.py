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

from dataclasses import dataclass

from wpimath.units import meters, meters_per_second, turns, turns_per_second

from pykit.autolog import autolog

"""
SwerveModuleIO provides swerve module inputs for the pykit log so that a match can be
replayed in AdvantageScope.
"""


class SwerveModuleIO:
    @autolog
    @dataclass
    class SwerveModuleIOInputs:
        drive_connected: bool = False
        steer_connected: bool = False
        encoder_connected: bool = False

        drive_position: turns = 0.0       # motor rotations
        drive_velocity: turns_per_second = 0.0
        drive_distance: meters = 0.0
        drive_speed: meters_per_second = 0.0

        steer_position: turns = 0.0       # mechanism rotations
        steer_absolute_position: turns = 0.0

    def __init__(self, name: str) -> None:
        self.name = name

    def updateInputs(self, inputs: SwerveModuleIOInputs) -> None:
        """
        Update the swerve module I/O inputs.

        :param inputs: The swerve module I/O inputs to update.
        """
