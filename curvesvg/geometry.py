"""Viewport computation, stroke scaling, number formatting and option checks."""
import math
from typing import Sequence

import numpy as np

from .types import Segment, Viewport, Options
from .constants import PADDING_FACTOR, STEP_FACTOR

# ============================================================
# Error Type
# ============================================================
class OptionsError(ValueError):
    """Raised by check_options when render options violate their preconditions."""

# ============================================================
# Viewport
# ============================================================
def compute_viewport(
    segments: Sequence[Segment], thickness: float, *, padding_factor: float = PADDING_FACTOR,
) -> Viewport:
    """Bounding box of all points, padded by padding_factor * thickness / 2 per side.

    Min/max start at zero rather than at the first point, so the box always
    contains the origin. Curves that sit entirely off-origin get a box
    stretched back to (0, 0); callers rely on this output staying stable.
    """
    xmin = ymin = xmax = ymax = 0.0
    pts = [p for seg in segments for p in seg]
    if pts:
        arr = np.asarray(pts, dtype=np.float64).reshape(-1, 2)
        lo = np.minimum(arr.min(axis=0), 0.0)
        hi = np.maximum(arr.max(axis=0), 0.0)
        xmin, ymin = float(lo[0]), float(lo[1])
        xmax, ymax = float(hi[0]), float(hi[1])

    edge = padding_factor * thickness / 2
    xmin -= edge; ymin -= edge
    xmax += edge; ymax += edge
    return Viewport(xmin, ymin, xmax - xmin, ymax - ymin)

def stroke_width(thickness: float, view: Viewport, step_factor: float = STEP_FACTOR) -> float:
    """Scale thickness by the viewport width so strokes look the same at any depth."""
    return thickness * view.w / step_factor

# ============================================================
# Formatting
# ============================================================
def fmt_num(value: float, precision: int) -> str:
    """Fixed-point with *precision* decimals, trailing zeros and bare '.' removed.

    fmt_num(2.5, 2) -> "2.5", fmt_num(3.0, 2) -> "3", fmt_num(-0.0, 2) -> "-0".
    """
    s = f"{float(value):.{precision}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s

# ============================================================
# Option Checks
# ============================================================
_BAD_COLOR_CHARS = set("'<>;{}")

def check_options(opts: Options) -> Options:
    """Return opts unchanged, or raise OptionsError describing the first bad field."""
    if isinstance(opts.depth, bool) or not isinstance(opts.depth, int) or opts.depth < 0:
        raise OptionsError(f"depth must be a non-negative int: {opts.depth!r}")
    if (isinstance(opts.thickness, bool) or not isinstance(opts.thickness, (int, float))
            or not math.isfinite(opts.thickness) or opts.thickness <= 0):
        raise OptionsError(f"thickness must be finite and positive: {opts.thickness!r}")
    if isinstance(opts.precision, bool) or not isinstance(opts.precision, int) or opts.precision < 0:
        raise OptionsError(f"precision must be a non-negative int: {opts.precision!r}")
    if not isinstance(opts.color, str) or not opts.color.strip():
        raise OptionsError(f"color must be a non-empty string: {opts.color!r}")
    bad = _BAD_COLOR_CHARS.intersection(opts.color)
    if bad:
        raise OptionsError(f"color contains markup characters {sorted(bad)}: {opts.color!r}")
    return opts
