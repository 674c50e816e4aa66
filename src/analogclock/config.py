"""
Configuration & Visual Constants
================================
This module serves as the central registry for the constants that shape the
clock face.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (e.g. "/ 20", "* 0.8") scattered
   throughout the layout and painting code.
2. Proportionality: Every stroke width and radius is expressed as a divisor
   of the viewport's smaller dimension, so the whole face rescales linearly.

Exports:
    *_DIVISOR (float): minDim / divisor gives the element size in pixels.
    REDRAW_DELAY_MS (int): Delay between self-issued redraw requests.
"""

# Dial element sizes (minDim / divisor)
RIM_STROKE_DIVISOR: float = 20.0
CENTER_DOT_DIVISOR: float = 40.0
MAJOR_TICK_DIVISOR: float = 100.0
MINOR_TICK_DIVISOR: float = 200.0
NUMERAL_FONT_DIVISOR: float = 8.0

# Hand stroke widths (minDim / divisor)
HOUR_HAND_STROKE_DIVISOR: float = 40.0
MINUTE_HAND_STROKE_DIVISOR: float = 50.0
SECOND_HAND_STROKE_DIVISOR: float = 100.0

# Hand lengths (viewport width / divisor)
HOUR_HAND_LENGTH_DIVISOR: float = 5.0
MINUTE_HAND_LENGTH_DIVISOR: float = 4.0
SECOND_HAND_LENGTH_DIVISOR: float = 4.0

# Numerals are inset from the rim by font size * factor
NUMERAL_INSET_FACTOR: float = 1.2
NUMERAL_COUNT: int = 12

# Tick dots sit on a ring at outer radius * factor
TICK_RING_FACTOR: float = 0.8
TICK_COUNT: int = 60
MAJOR_TICK_EVERY: int = 5

# Moment scale: 0..60 maps to a full turn
MOMENT_SCALE: float = 60.0

INK_COLOR: str = "black"

REDRAW_DELAY_MS: int = 1000
DEFAULT_SIZE_HINT: int = 300

WINDOW_TITLE: str = "Analog Clock"
