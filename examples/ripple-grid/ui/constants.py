"""Window, timing and color constants."""

# Timing
FPS = 60

# Window
SCREEN_W = 720
SCREEN_H = 960
STATUS_H = 32

# Tiles
TILE_COLOR = (230, 230, 230)
TILE_STROKE = 3

# Knob overlay
OVERLAY_ALPHA = 160
KNOB_RING = (255, 255, 255)
KNOB_TICK = (220, 220, 220)
KNOB_MINOR = (140, 140, 140)
KNOB_LABEL = (200, 200, 200)
KNOB_POINTER = (255, 255, 255)
KNOB_SWEEP_DEG = (-150.0, 150.0)
KNOB_MAJOR_TICKS = 12
KNOB_MINOR_PER_MAJOR = 4

# Desktop pinch emulation
VIRTUAL_PINCH_SPREAD = 120.0
VIRTUAL_PINCH_STEP = 10.0

# Colors
BG_COLOR = (0, 0, 0)
STATUS_BG = (20, 20, 28)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
TUNING_COLOR = (255, 200, 80)
