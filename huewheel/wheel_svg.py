"""SVG hue wheel with a marker for the selected color."""

from huewheel.color_utils import hsv_to_rgb
from huewheel.wheel_geometry import (
    DEFAULT_COLOR,
    DEFAULT_SEGMENTS,
    WheelSpec,
    arc_path,
    marker_point,
    marker_radius,
    segments,
)

PRESET_COLORS = [
    "#ff0000", "#ff8000", "#ffff00", "#80ff00", "#00ff00",
    "#00ff80", "#00ffff", "#0080ff", "#0000ff", "#8000ff",
    "#ff00ff", "#ff0080", "#ff4040", "#ff8040", "#ffff40",
]


def segment_colors(n: int = DEFAULT_SEGMENTS) -> list[str]:
    """CSS fill for each band, taken at the band's start angle."""
    colors = []
    for seg in segments(n):
        r, g, b = hsv_to_rgb(seg.start_angle, 1, 1)
        colors.append(f"rgb({r},{g},{b})")
    return colors


def wheel_svg(
    spec: WheelSpec,
    selected: str = DEFAULT_COLOR,
    n_segments: int = DEFAULT_SEGMENTS,
) -> str:
    """Return an SVG string of the hue ring and its marker."""
    width = 2 * spec.center.x
    height = 2 * spec.center.y

    paths = []
    for seg, color in zip(segments(n_segments), segment_colors(n_segments)):
        arc = arc_path(spec, seg)
        paths.append(
            f'    <path d="{arc.d}" stroke="{color}" stroke-width="{spec.stroke_width}" '
            f'fill="none" stroke-linecap="butt"/>'
        )
    body = "\n".join(paths)

    marker = marker_point(spec, selected)
    return f"""<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}"
     width="{width}" height="{height}">

  <!-- Hue bands -->
  <g>
{body}
  </g>

  <!-- Marker -->
  <circle cx="{marker.x}" cy="{marker.y}" r="{marker_radius(spec)}" fill="{selected}" stroke="#fff" stroke-width="3"/>
</svg>"""
