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
# Live tuning of closed-loop gains over NetworkTables

import logging
from typing import Callable, Dict, Optional, Tuple

from ntcore import DoubleEntry, NetworkTableInstance
from pykit.logger import Logger

from lib_6107.util.gains import GainProfile, GainRole

logger = logging.getLogger(__name__)

COEFFICIENTS = ("P", "I", "D", "V")


class GainTuningBridge:
    """
    Exposes a gain profile as NetworkTables numbers (for example "/Tuning/Swerve/Drive P")
    that can be edited from a dashboard.

    Edits are only copied into the profile when `pull()` is called, typically from an
    operator button, so a half typed value never reaches the motors.
    """

    def __init__(self, profile: GainProfile, apply: Callable[[], object],
                 prefix: str = "/Tuning/Swerve",
                 inst: Optional[NetworkTableInstance] = None) -> None:
        """
        :param profile: Gains to tune. Updated in place by `pull()`
        :param apply: Called after a pull that changed a value, to push the profile out to the motors
        :param prefix: NetworkTables path the values are published under
        :param inst: NetworkTables instance, default is the global one
        """
        self._profile = profile
        self._apply = apply
        self._prefix = prefix.rstrip("/")

        inst = inst or NetworkTableInstance.getDefault()

        self._entries: Dict[Tuple[GainRole, str], DoubleEntry] = {}

        for role in GainRole:
            values = profile.get(role).as_tuple()

            for name, value in zip(COEFFICIENTS, values):
                entry = inst.getDoubleTopic(self.path(role, name)).getEntry(value)
                # Keep a value already on the server (set from the dashboard or persisted)
                entry.setDefault(value)
                self._entries[(role, name)] = entry

    def path(self, role: GainRole, coefficient: str) -> str:
        return f"{self._prefix}/{role.value} {coefficient}"

    def pull(self) -> bool:
        """
        Copy the tunable values into the profile and push them out if any changed.

        :returns: True if any value was different from what the profile held
        """
        changed = False

        for role in GainRole:
            gains = self._profile.get(role)
            values = [self._entries[(role, name)].get() for name in COEFFICIENTS]

            if gains.update(*values):
                changed = True
                logger.info(f"Tuned {role.value} gains: {gains}")

            for name, value in zip(COEFFICIENTS, values):
                Logger.recordOutput(f"Tuning/{role.value} {name}", value)

        if changed:
            self._apply()

        return changed

    def close(self) -> None:
        for entry in self._entries.values():
            entry.close()

        self._entries.clear()
