"""Tests for gen_curve_svg.py demo script."""
import math
import os
import pytest

from gen_curve_svg import arc_poly, demo_curve, main
from curvesvg.geometry import OptionsError


def test_arc_poly_full_circle():
    pts = arc_poly(0.0, 0.0, 2.0, 0.0, 2 * math.pi, n=8)
    assert len(pts) == 9
    assert abs(pts[0][0] - 2.0) < 1e-12 and abs(pts[0][1]) < 1e-12
    assert abs(pts[-1][0] - 2.0) < 1e-12 and abs(pts[-1][1]) < 1e-12
    for x, y in pts:
        assert abs(math.hypot(x, y) - 2.0) < 1e-12


class TestDemoCurve:
    def test_three_segments(self):
        assert len(demo_curve().render(0)) == 3

    def test_circle_closed(self):
        circle = demo_curve().render(0)[0]
        assert abs(circle[0][0] - circle[-1][0]) < 1e-9
        assert abs(circle[0][1] - circle[-1][1]) < 1e-9


class TestMain:
    def test_writes_curve_svg(self, tmp_path, capsys):
        path = main([], out_dir=str(tmp_path))
        assert path == os.path.join(str(tmp_path), "curve.svg")
        with open(path, encoding="utf-8") as f:
            svg = f.read()
        assert svg.startswith("<svg") and svg.endswith("</svg>")
        assert svg.count("<polyline ") == 3
        assert "stroke: black;" in svg
        assert "written" in capsys.readouterr().out

    def test_arguments_override_options(self, tmp_path):
        path = main(["2", "#336699", "1"], out_dir=str(tmp_path))
        with open(path, encoding="utf-8") as f:
            svg = f.read()
        # radius 10 circle, edge = 1.5 * 2 / 2
        assert "viewBox='-11.5 -11.5 23 23'" in svg
        assert "stroke: #336699;" in svg

    def test_bad_color_rejected(self, tmp_path):
        with pytest.raises(OptionsError):
            main(["1", "red'"], out_dir=str(tmp_path))
        assert not os.path.exists(tmp_path / "curve.svg")
