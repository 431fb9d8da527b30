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
# Commonly used constants not found in existing wpilib modules

from math import pi

# The period is available from robot.GetPeriod() and the following provides
# a default value in case it returns 0 or None
DEFAULT_ROBOT_PERIOD = 1.0 / 50

######################################################################
# Math
RADIANS_PER_REVOLUTION = 2 * pi
DEGREES_PER_REVOLUTION = 360.0

# Anything slower than this is considered stopped
SPEED_EPSILON = 1e-6
