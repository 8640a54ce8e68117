import numpy as np

# tolerance for tuple and matrix equality
EPSILON = 0.00001
# colors compare to 4 significant decimal places
COLOR_EPSILON = 0.0001

MAX_COLOR_VALUE = 255
PPM_MAGIC = "P3"
PPM_LINE_WIDTH = 70

OPAQUE_BLACK = np.array([0.0, 0.0, 0.0, 1.0], dtype=np.float64)

# projectile plot defaults
CANVAS_WIDTH = 900
CANVAS_HEIGHT = 550
GRAVITY = np.array([0.0, -0.1, 0.0], dtype=np.float64)
WIND = np.array([-0.01, 0.0, 0.0], dtype=np.float64)
START_POSITION = np.array([0.0, 1.0, 0.0], dtype=np.float64)
LAUNCH_DIRECTION = np.array([1.0, 1.8, 0.0], dtype=np.float64)
LAUNCH_SPEED = 11.25
PLOT_COLOR = np.array([1.0, 0.5, 0.5], dtype=np.float64)
OUTPUT_FILE = "fodder_plot.ppm"
