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

from phoenix6 import BaseStatusSignal, StatusCode


class Phoenix6Signals:
    """
    Batched refresh of every registered CTRE status signal. Devices register the
    signals they read and robotPeriodic refreshes them all in one call, which is
    cheaper on the CAN bus than refreshing each device on its own.
    """
    _signals: List[BaseStatusSignal] = []

    @classmethod
    def register_signal(cls, signal: BaseStatusSignal) -> None:
        cls._signals.append(signal)

    @classmethod
    def register_signals(cls, *signals: BaseStatusSignal) -> None:
        cls._signals.extend(signals)

    @classmethod
    def clear(cls) -> None:
        cls._signals = []

    @classmethod
    def refresh(cls) -> StatusCode:
        """
        Called from robot.robotPeriodic before any subsystem reads its devices
        """
        if not cls._signals:
            return StatusCode.OK

        return BaseStatusSignal.refresh_all(*cls._signals)
