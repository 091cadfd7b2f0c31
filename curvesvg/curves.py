"""Curve sources backed by precomputed geometry."""
from typing import Sequence

from .types import Point, Segment


class StaticCurve:
    """Curve source that returns the same segments at every depth.

    Wraps polylines computed elsewhere so they can be passed to render_svg.
    """

    def __init__(self, segments: Sequence[Segment], min_depth: int = 0):
        self.segments = [list(seg) for seg in segments]
        self.min_depth = min_depth

    def render(self, depth: int) -> list[list[Point]]:
        return [list(seg) for seg in self.segments]
