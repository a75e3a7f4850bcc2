WINDOW_WIDTH = 900
WINDOW_HEIGHT = 500
WINDOW_TITLE = "Shell Game"

CUP_RADIUS = 50
BALL_RADIUS = 20

# Vertical lift of the swap arc control point above the higher of the two cups.
SWAP_ARC_HEIGHT = 100.0

# Anti-repeat pair generation gives up after this many draws for one entry.
MAX_PAIR_ATTEMPTS = 50

# Concurrent swap capacity by table size.
MAX_CONCURRENT_SWAPS_SMALL = 1
MAX_CONCURRENT_SWAPS_LARGE = 2
LARGE_TABLE_CUP_COUNT = 5

# Distraction (stage 4) toggle period in seconds.
DISTRACTION_INTERVAL = 0.1

# Phase prompt sits near the top of the table.
PROMPT_Y = 80

# Control button strip along the bottom edge (model coordinates, y down).
CONTROL_BAR_Y = 460
CONTROL_BUTTON_WIDTH = 150
CONTROL_BUTTON_HEIGHT = 44
CONTROL_BUTTON_GAP = 16
