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
# See the documentation for more details on how this works
#
# Documentation can be found at https://robotpy.readthedocs.io/projects/pyfrc/en/latest/physics.html
#
# The idea here is you provide a simulation object that overrides specific
# pieces of WPILib, and modifies motors/sensors accordingly depending on the
# state of the simulation.
import inspect
import logging

from pyfrc.physics.core import PhysicsInterface

from robot import MyRobot

logger = logging.getLogger(__name__)


class PhysicsEngine:
    """
    Simulates the swerve drive. The simulated motors follow their commands exactly,
    the drive subsystem integrates them and turns the simulated gyro.

    Any objects created or manipulated in this file are for simulation purposes only.
    """
    def __init__(self, physics_controller: PhysicsInterface, robot: "MyRobot"):
        """
        Initialize the simulator.  This method is called after the container and all
        subsystems have been initialized.

        :param physics_controller: `pyfrc.physics.core.Physics` object
                                   to communicate simulation effects to
        :param robot: your robot object
        """
        logger.info("PhysicsEngine.__init__: entry")

        self._physics_controller = physics_controller
        self._robot: MyRobot = robot

        # Initialize our simulated subsystems
        for subsystem in robot.container.subsystems:
            if hasattr(subsystem, "sim_init") and callable(getattr(subsystem, "sim_init")):
                subsystem.sim_init(physics_controller)

        # Field declared by the physics controller, shown on the simulation GUI
        self.field = physics_controller.field

        logger.info("PhysicsEngine.__init__: exit")

    def update_sim(self, now: float, tm_diff: float) -> None:
        """
        Called when the simulation parameters for the program need to be
        updated.

        :param now:     The current time as a float
        :param tm_diff: The amount of time that has passed since the last
                        time that this function was called
        """
        kwargs = {
            "now": now,
            "tm_diff": tm_diff,
        }
        total_amps_used: float = 0.0

        if self._robot.isEnabled():
            for subsystem in self._robot.container.subsystems:
                if hasattr(subsystem, "simulationPeriodic") and callable(getattr(subsystem,
                                                                                 "simulationPeriodic")):
                    signature = inspect.signature(subsystem.simulationPeriodic)
                    parameters = signature.parameters

                    if inspect.Parameter.VAR_KEYWORD in [p.kind for p in parameters.values()]:
                        total_amps_used += subsystem.simulationPeriodic(**kwargs) or 0.0

        self.field.setRobotPose(self._robot.container.robot_drive.get_pose())
