"""Polar geometry for the hue ring.

Angles are in degrees with 0 pointing up (towards negative y) and increasing
clockwise, which is the screen-space reading of the standard rotation by -90.
Rendering and hit-testing both go through this convention.
"""

import math
from typing import NamedTuple

from huewheel.color_utils import hex_to_hsv, is_hex_color

DEFAULT_SEGMENTS = 60
DEFAULT_SIZE = 220
DEFAULT_STROKE_WIDTH = 28
DEFAULT_COLOR = "#ff0000"


class Point(NamedTuple):
    x: float
    y: float


class WheelSpec(NamedTuple):
    center: Point
    radius: float
    stroke_width: float


class Segment(NamedTuple):
    start_angle: float
    end_angle: float


class ArcPath(NamedTuple):
    """Clockwise arc between two points on the ring's centerline."""

    start: Point
    end: Point
    radius: float
    large_arc: bool

    @property
    def d(self) -> str:
        """SVG path data for this arc."""
        return (
            f"M {self.start.x} {self.start.y} "
            f"A {self.radius} {self.radius} 0 {int(self.large_arc)} 1 {self.end.x} {self.end.y}"
        )


def wheel_spec_for_size(size: float, stroke_width: float) -> WheelSpec:
    """Ring that fills a *size* x *size* box, outer edge touching the border."""
    center = size / 2
    return WheelSpec(Point(center, center), center - stroke_width / 2, stroke_width)


def point_for_angle(spec: WheelSpec, angle_deg: float) -> Point:
    """Point on the ring centerline at *angle_deg*, 0 up and clockwise."""
    a = (angle_deg - 90) * math.pi / 180
    return Point(
        spec.center.x + spec.radius * math.cos(a),
        spec.center.y + spec.radius * math.sin(a),
    )


def segments(n: int = DEFAULT_SEGMENTS) -> list[Segment]:
    """Split [0, 360) into *n* equal bands, in increasing-angle order."""
    if n < 1:
        raise ValueError(f"segment count must be positive, got {n}")
    return [Segment(i * 360 / n, (i + 1) * 360 / n) for i in range(n)]


def arc_path(spec: WheelSpec, segment: Segment) -> ArcPath:
    """Clockwise arc covering *segment*, flagged large when wider than 180."""
    return ArcPath(
        start=point_for_angle(spec, segment.start_angle),
        end=point_for_angle(spec, segment.end_angle),
        radius=spec.radius,
        large_arc=segment.end_angle - segment.start_angle > 180,
    )


def hit_test(spec: WheelSpec, point: Point) -> float | None:
    """Hue angle under *point*, or None when it falls outside the ring band.

    A miss is an ordinary result; callers should leave the selection alone.
    """
    dx = point.x - spec.center.x
    dy = point.y - spec.center.y
    dist = math.sqrt(dx * dx + dy * dy)
    half = spec.stroke_width / 2
    if dist < spec.radius - half or dist > spec.radius + half:
        return None

    theta = math.atan2(dy, dx) * 180 / math.pi + 90
    if theta < 0:
        theta += 360
    # -1e-15 + 360 rounds to 360.0 in floating point
    if theta >= 360:
        theta = 0.0
    return theta


def marker_point(spec: WheelSpec, hex_str: str) -> Point:
    """Where the marker for a stored color sits; unparseable colors sit at 0."""
    angle = hex_to_hsv(hex_str).h if is_hex_color(hex_str) else 0.0
    return point_for_angle(spec, angle)


def marker_radius(spec: WheelSpec) -> float:
    """Marker size: just inside the band, never negative."""
    return max(0.0, spec.stroke_width / 2 - 2)
