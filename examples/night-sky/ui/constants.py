"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 1280
SCREEN_H = 800
STATUS_H = 28

# Scrolling
WHEEL_STEP = 120  # pixels per wheel notch
KEY_STEP = 40

# Arrow geometry, in pixels around the arrow's resting point
ARROW_SHAFT = 90
ARROW_HEAD = 28

# Colors
BG_COLOR = (0, 0, 0)
MOON_FILL = (0, 0, 0)
STATUS_BG = (18, 18, 24)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
