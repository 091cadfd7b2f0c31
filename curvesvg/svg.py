"""SVG document assembly for rendered curves."""
from typing import Sequence

from .types import Segment, Viewport, Options, CurveSource
from .geometry import compute_viewport, stroke_width, fmt_num, check_options
from .constants import SVG_NS, STEP_FACTOR


def svg_lines(segments: Sequence[Segment], view: Viewport, thickness: float, opts: Options) -> list[str]:
    """Return the document as a list of lines, one polyline per segment.

    opts.color goes into the style rule unescaped; run check_options first if
    the token comes from an untrusted source.
    """
    p = opts.precision
    vb = " ".join(fmt_num(v, p) for v in view)
    out = [f"<svg xmlns='{SVG_NS}' viewBox='{vb}'>"]
    out.append(
        "<defs><style>polyline { fill: none; stroke-linecap: square; "
        f"stroke-width: {fmt_num(thickness, p)}; stroke: {opts.color}; }}</style></defs>"
    )
    for seg in segments:
        # each pair keeps its trailing space
        pts = "".join(f"{fmt_num(x, p)},{fmt_num(y, p)} " for x, y in seg)
        out.append(f"<polyline points='{pts}'/>")
    out.append("</svg>")
    return out


def render_svg(
    source: CurveSource, opts: Options, *, step_factor: float = STEP_FACTOR, strict: bool = False,
) -> str:
    """Render *source* at min_depth + opts.depth and return the SVG text.

    Pure: no I/O, inputs are not modified, identical inputs give identical output.
    With strict=True the options are checked first and OptionsError is raised
    instead of emitting a malformed document.
    """
    if strict:
        check_options(opts)
    segments = source.render(source.min_depth + opts.depth)
    view = compute_viewport(segments, opts.thickness)
    thickness = stroke_width(opts.thickness, view, step_factor)
    return "\n".join(svg_lines(segments, view, thickness, opts))


def write_svg(path: str, content: str) -> str:
    """Write an SVG document to *path* and return the path."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    print(f"SVG written to {path}")
    return path
