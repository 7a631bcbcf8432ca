from __future__ import annotations


DEFAULT_MAX_HIGHLIGHT_DISTANCE = 500.0
DEFAULT_Y_BUFFER_RATIO = 0.05
# left, right, top, bottom
DEFAULT_PLOT_GUTTERS = (64, 16, 24, 40)
DEFAULT_PIE_ROTATION_ANGLE = 270.0
DEFAULT_PIE_PADDING = 8.0
