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

from typing import List, Tuple

import pytest
from commands2 import Subsystem


class RecordingDrive(Subsystem):
    """Stands in for the drivetrain and remembers what it was asked to do"""
    def __init__(self):
        super().__init__()
        self.field_oriented = True
        self.speeds: List[Tuple[float, float, float, bool]] = []
        self.stops = 0

    def set_drive_speeds(self, forward, strafe, rotate, field_oriented=None):
        if field_oriented is None:
            field_oriented = self.field_oriented

        self.speeds.append((forward, strafe, rotate, field_oriented))

    def stop(self):
        self.stops += 1


@pytest.fixture
def recording_drive() -> RecordingDrive:
    return RecordingDrive()
