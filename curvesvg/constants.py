"""Named rendering constants.

Lengths are in the curve's own coordinate units.
"""

SVG_NS = "http://www.w3.org/2000/svg"

# Viewport padding
PADDING_FACTOR = 1.5        # edge = PADDING_FACTOR * thickness / 2 on every side

# Stroke scaling
STEP_FACTOR = 100.0         # nominal vertex spacing divisor: width = thickness * view.w / STEP_FACTOR

# Option defaults
DEFAULT_DEPTH = 0
DEFAULT_THICKNESS = 1.0
DEFAULT_COLOR = "black"
DEFAULT_PRECISION = 2
