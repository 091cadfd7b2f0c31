"""Generate curve.svg from a demo curve (unit circle with two diameters).

Usage: python gen_curve_svg.py [thickness] [color] [precision]
"""
import os, sys, math

from curvesvg import Options, Point, StaticCurve, render_svg, write_svg


def arc_poly(cx: float, cy: float, r: float, sa: float, ea: float, n: int = 60) -> list[Point]:
    """n+1 points along a circular arc from angle sa to ea (radians), centered at (cx, cy)."""
    step = (ea - sa) / n
    return [(cx + r * math.cos(sa + i * step), cy + r * math.sin(sa + i * step))
            for i in range(n + 1)]


def demo_curve() -> StaticCurve:
    """Closed circle of radius 10 plus its horizontal and vertical diameters."""
    circle = arc_poly(0.0, 0.0, 10.0, 0.0, 2 * math.pi, n=72)
    return StaticCurve([circle, [(-10.0, 0.0), (10.0, 0.0)], [(0.0, -10.0), (0.0, 10.0)]])


def main(argv: list[str], out_dir: str | None = None) -> str:
    opts = Options()
    if len(argv) > 0:
        opts = opts._replace(thickness=float(argv[0]))
    if len(argv) > 1:
        opts = opts._replace(color=argv[1])
    if len(argv) > 2:
        opts = opts._replace(precision=int(argv[2]))

    svg = render_svg(demo_curve(), opts, strict=True)
    _dir = out_dir or os.path.dirname(os.path.abspath(__file__))
    return write_svg(os.path.join(_dir, "curve.svg"), svg)


if __name__ == "__main__":
    main(sys.argv[1:])
