"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 60

# Layout dimensions
LANE_H = 96
LABEL_W = 120
CURVE_W = 140
TRACK_W = 440
SIDEBAR_W = 160
STATUS_H = 36

# Shaping strategies shown, one lane each
SHAPING_NAMES = ["linear", "quad_in_out", "cubic_out", "smooth_step", "damped"]
LANE_COUNT = len(SHAPING_NAMES)

SCREEN_W = LABEL_W + CURVE_W + TRACK_W + SIDEBAR_W
SCREEN_H = LANE_H * LANE_COUNT + STATUS_H

# Marker
MARKER_RADIUS = 10
TRACK_PAD = 20  # padding inside the track

# Rate adjustment
RATE_STEP = 0.25
RATE_MIN = 0.25
RATE_MAX = 4.0

# Colors
BG_COLOR = (20, 20, 30)
LANE_BG = (30, 30, 45)
LANE_BORDER = (50, 50, 70)
CURVE_BG = (15, 15, 25)
TRACK_BG = (25, 25, 40)
TRACK_RAIL = (60, 60, 80)
SIDEBAR_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
SETTLED_COLOR = (255, 255, 255)

# Shaping name -> color
SHAPING_COLORS: dict[str, tuple[int, int, int]] = {
    "linear": (0, 220, 220),
    "quad_in_out": (255, 160, 40),
    "cubic_out": (60, 220, 80),
    "smooth_step": (220, 80, 220),
    "damped": (240, 220, 60),
}
