"""Render polyline curves as standalone SVG documents."""

from .types import Point, Segment, Viewport, Options, CurveSource
from .geometry import (
    OptionsError,
    compute_viewport, stroke_width, fmt_num, check_options,
)
from .curves import StaticCurve
from .svg import svg_lines, render_svg, write_svg
from .constants import PADDING_FACTOR, STEP_FACTOR
