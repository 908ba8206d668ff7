"""Default puzzle parameters and the limits the frontends accept.

The engine itself only enforces the puzzle rules (see
``backend.models.params``); the upper bounds here exist because every
frontend has to draw the tubes and the palette has a fixed number of
colors.
"""

# Defaults used by the menus and the command line.
DEFAULT_TUBES = 7
DEFAULT_CAPACITY = 4
DEFAULT_COLORS = 5

# Tubes per grid row.
MAX_ROW_WIDTH = 7

# Frontend limits.
MIN_TUBES = 2
MAX_TUBES = 21
MIN_CAPACITY = 1
MAX_CAPACITY = 8
MIN_COLORS = 1
MAX_COLORS = 19  # one per palette entry
