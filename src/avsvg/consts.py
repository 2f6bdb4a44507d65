"""Central module containing constants for SVG path processing"""

from __future__ import annotations

import math
from typing import Dict

###############################################################################
# Path data grammar
###############################################################################

# Command letters (uppercase = absolute, lowercase = relative):
SVG_CMDS: str = "MmLlHhVvCcSsQqTtAaZz"

# Definition of a number. Accepts concatenated values like "1.5.5" (1.5, .5) or "10-5" (10, -5).
SVG_ARGS: str = r"[-+]?[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?"

# Split position for chunks: in front of every letter, except exponent markers.
SVG_CHUNK_SPLIT: str = r"(?=[A-DF-Za-df-z])"

# Characters allowed between the numbers of a coordinate run
SVG_ARGS_SEPARATORS: str = " \t\r\n\f,"

# Expected number of coordinates for each (uppercase) command type
COMMAND_ARITY: Dict[str, int] = {
    "M": 2,  # MoveTo (x y)
    "L": 2,  # LineTo (x y)
    "H": 1,  # Horizontal LineTo (x)
    "V": 1,  # Vertical LineTo (y)
    "C": 6,  # Cubic Bezier (x1 y1 x2 y2 x y)
    "S": 4,  # Smooth cubic Bezier (x2 y2 x y)
    "Q": 4,  # Quadratic Bezier (x1 y1 x y)
    "T": 2,  # Smooth quadratic Bezier (x y)
    "A": 7,  # Arc (rx ry x-axis-rotation large-arc-flag sweep-flag x y)
    "Z": 0,  # ClosePath
}

###############################################################################
# Numerics
###############################################################################

TAU: float = 2.0 * math.pi

# Arcs are split so that each cubic segment spans at most a quarter turn
ARC_SEGMENT_MAX_ANGLE: float = TAU / 4.0

# Tolerances used for approximate matrix comparisons
MATRIX_RTOL: float = 1.0e-9
MATRIX_ATOL: float = 1.0e-12

###############################################################################
# Render property defaults (opaque to the geometry core)
###############################################################################

DEFAULT_STROKE_JOIN: str = "miter"
DEFAULT_STROKE_CAP: str = "square"
DEFAULT_STROKE_WIDTH: float = 1.0
DEFAULT_STROKE_COLOR: str = "#000000"
DEFAULT_FILL_COLOR: str = "none"
DEFAULT_OPACITY: float = 1.0
