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

import logging
import math
from typing import Dict, Optional

from ntcore import NetworkTable, NetworkTableInstance

logger = logging.getLogger(__name__)


class TargetSource:
    """
    Where alignment commands get their AprilTag measurements from.

    Every call names the camera so a command can use whichever camera faces the
    side of the robot it is aligning.
    """
    def has_target(self, camera: str) -> bool:
        raise NotImplementedError("Implement in derived class")

    def yaw(self, camera: str) -> float:
        """Horizontal angle to the best target (degrees)"""
        raise NotImplementedError("Implement in derived class")

    def y(self, camera: str) -> float:
        """Lateral offset of the best target from the camera"""
        raise NotImplementedError("Implement in derived class")

    def distance(self, camera: str) -> float:
        raise NotImplementedError("Implement in derived class")


class PhotonTargetSource(TargetSource):
    """
    Reads the per-camera topics PhotonVision publishes under "/photonvision/<camera>"
    """
    def __init__(self, inst: Optional[NetworkTableInstance] = None, table: str = "photonvision"):
        inst = inst or NetworkTableInstance.getDefault()

        self._table = inst.getTable(table)
        self._cameras: Dict[str, "_Camera"] = {}

    def _camera(self, camera: str) -> "_Camera":
        if camera not in self._cameras:
            logger.info(f"Subscribing to PhotonVision camera '{camera}'")
            self._cameras[camera] = _Camera(self._table.getSubTable(camera))

        return self._cameras[camera]

    def has_target(self, camera: str) -> bool:
        return self._camera(camera).has_target.get()

    def yaw(self, camera: str) -> float:
        return self._camera(camera).yaw.get()

    def y(self, camera: str) -> float:
        pose = self._camera(camera).pose.get()
        return pose[1] if len(pose) > 1 else 0.0

    def distance(self, camera: str) -> float:
        pose = self._camera(camera).pose.get()
        return math.hypot(pose[0], pose[1]) if len(pose) > 1 else 0.0


class _Camera:
    def __init__(self, table: NetworkTable):
        self.has_target = table.getBooleanTopic("hasTarget").subscribe(False)
        self.yaw = table.getDoubleTopic("targetYaw").subscribe(0.0)
        # Camera to target transform as [x, y, z, qw, qx, qy, qz]
        self.pose = table.getDoubleArrayTopic("targetPose").subscribe([])
