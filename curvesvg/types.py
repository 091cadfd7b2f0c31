"""Shared type definitions for curve rendering."""
from typing import NamedTuple, Protocol, Sequence

from .constants import DEFAULT_DEPTH, DEFAULT_THICKNESS, DEFAULT_COLOR, DEFAULT_PRECISION

Point = tuple[float, float]
Segment = Sequence[Point]

class Viewport(NamedTuple):
    x: float; y: float; w: float; h: float

class Options(NamedTuple):
    """Per-render settings. Color is an opaque token inserted into the markup as-is."""
    depth: int = DEFAULT_DEPTH              # added to the curve's minimum depth
    thickness: float = DEFAULT_THICKNESS    # stroke thickness in curve units
    color: str = DEFAULT_COLOR
    precision: int = DEFAULT_PRECISION      # decimal places

class CurveSource(Protocol):
    """Anything that yields polyline segments for an absolute recursion depth."""
    min_depth: int

    def render(self, depth: int) -> Sequence[Segment]: ...
