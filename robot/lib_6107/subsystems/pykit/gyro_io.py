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

from wpimath.units import radians, radians_per_second

from pykit.autolog import autolog


class GyroIO:
    """
    Gyro inputs recorded for AdvantageScope replay
    """
    @autolog
    @dataclass
    class GyroIOInputs:
        connected: bool = False
        yaw: radians = 0.0
        yaw_rate: radians_per_second = 0.0

    def updateInputs(self, inputs: GyroIOInputs) -> None:
        pass
