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
# Timing of blocks of periodic code, recorded through pykit

from pykit.logger import Logger
from wpilib import RobotController


class LogTracer:
    """
    LogTracer times related blocks of code. `resetOuter` starts a new block with a
    prefix, `record` logs the time since the previous mark and `recordTotal` logs
    the time since the block started.
    """
    _inner_start: int = 0
    _outer_start: int = 0

    _prefix: str = ""

    @classmethod
    def resetOuter(cls, prefix: str) -> None:
        cls._outer_start = RobotController.getFPGATime()
        cls.reset()
        cls._prefix = prefix

    @classmethod
    def reset(cls) -> None:
        cls._inner_start = RobotController.getFPGATime()

    @classmethod
    def record(cls, action: str) -> None:
        now = RobotController.getFPGATime()
        Logger.recordOutput(f"LogTracer/{cls._prefix}/{action}MS", (now - cls._inner_start) / 1000.0)
        cls._inner_start = now

    @classmethod
    def recordTotal(cls) -> None:
        now = RobotController.getFPGATime()
        Logger.recordOutput(f"LogTracer/{cls._prefix}/TotalMS", (now - cls._outer_start) / 1000.0)
