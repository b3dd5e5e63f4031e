"""Configuration for the Pickup Visualizer."""

# Window settings
WINDOW_WIDTH = 900
WINDOW_HEIGHT = 680
WINDOW_TITLE = "Harmonic Anti-Node Visualizer"
FPS = 60

# Colors (RGB)
COLOR_BACKGROUND = (27, 27, 27)
COLOR_PANEL = (20, 20, 20)
COLOR_TEXT = (200, 200, 210)
COLOR_TEXT_DIM = (130, 130, 140)
COLOR_HIGHLIGHT = (173, 216, 230)
COLOR_STRING = (160, 160, 160)
COLOR_ANTI_NODE = (166, 207, 161)
COLOR_BRIDGE_PICKUP = (181, 126, 220)
COLOR_NECK_PICKUP = (178, 102, 255)
COLOR_BAR_BACKGROUND = (40, 40, 55)
COLOR_BAR_FILL = (100, 200, 255)

# Layout (pixels)
SIDE_MARGIN = 20
PANEL_TOP = 20
PANEL_ROW_HEIGHT = 24
TOP_PADDING = 50
LABEL_HEIGHT = 10
HEAT_MAP_HEIGHT = 60
GAP_AFTER_HEAT_MAP = 25
HARMONIC_SPACING = 22
BOTTOM_PADDING = 28
ANTI_NODE_RADIUS = 4
PICKUP_LINE_WIDTH = 2
BAR_WIDTH = 200
BAR_HEIGHT = 8

# Parameter step sizes (Left/Right arrows)
LENGTH_STEP = 5.0
SEARCH_LIMIT_STEP = 5
WEIGHT_STEP = 0.05
