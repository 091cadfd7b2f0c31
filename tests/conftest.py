"""Shared test fixtures for curve rendering tests."""
import pytest
from curvesvg.types import Options
from curvesvg.curves import StaticCurve


class RecordingCurve:
    """Curve source that records every depth it is asked to render."""

    def __init__(self, segments, min_depth=0):
        self.segments = segments
        self.min_depth = min_depth
        self.calls = []

    def render(self, depth):
        self.calls.append(depth)
        return self.segments


@pytest.fixture
def line_curve():
    """Single horizontal segment (0,0)-(10,0)."""
    return StaticCurve([[(0.0, 0.0), (10.0, 0.0)]])


@pytest.fixture
def opts():
    """Unit thickness, two decimal places."""
    return Options(depth=0, thickness=1.0, color="black", precision=2)


@pytest.fixture
def recording_curve():
    """Two segments, minimum depth 3."""
    return RecordingCurve([[(0.0, 0.0), (1.0, 1.0)], [(1.0, 1.0), (2.0, 0.0), (3.0, 1.0)]],
                          min_depth=3)
