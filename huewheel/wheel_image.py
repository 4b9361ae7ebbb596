"""Raster hue wheel for click capture."""

import math

from PIL import Image, ImageDraw

from huewheel.color_utils import hsv_to_rgb, is_hex_color
from huewheel.wheel_geometry import (
    DEFAULT_COLOR,
    DEFAULT_SEGMENTS,
    WheelSpec,
    marker_point,
    marker_radius,
    segments,
)


def wheel_image(
    spec: WheelSpec,
    selected: str = DEFAULT_COLOR,
    n_segments: int = DEFAULT_SEGMENTS,
    background: str = "white",
) -> Image.Image:
    """Draw the ring and marker into an RGB image of the wheel's box.

    Pixel coordinates of the result are the wheel's local coordinates, so a
    click position can go straight into hit_test.
    """
    cx, cy = spec.center
    img = Image.new("RGB", (math.ceil(2 * cx), math.ceil(2 * cy)), background)
    draw = ImageDraw.Draw(img)

    # PIL measures arcs clockwise from 3 o'clock; the ring's 0 is 12 o'clock.
    outer = spec.radius + spec.stroke_width / 2
    box = [cx - outer, cy - outer, cx + outer, cy + outer]
    width = max(1, round(spec.stroke_width))
    for seg in segments(n_segments):
        draw.arc(
            box,
            seg.start_angle - 90,
            seg.end_angle - 90,
            fill=hsv_to_rgb(seg.start_angle, 1, 1),
            width=width,
        )

    mx, my = marker_point(spec, selected)
    mr = marker_radius(spec)
    draw.ellipse(
        [mx - mr, my - mr, mx + mr, my + mr],
        fill=selected if is_hex_color(selected) else None,
        outline="white",
        width=3,
    )
    return img
