"""Turning pointer clicks into a selected color."""

import logging

from huewheel.color_utils import hsv_to_hex
from huewheel.wheel_geometry import Point, WheelSpec, hit_test

log = logging.getLogger(__name__)


def color_for_click(spec: WheelSpec, click, last_click) -> str | None:
    """Hex color for a new click on the ring, or None to keep the selection.

    *click* is an (x, y) pair or None. The click component reports its last
    click again on every rerun, so a click equal to *last_click* has already
    been handled and selects nothing.
    """
    if click is None or click == last_click:
        return None
    angle = hit_test(spec, Point(*click))
    if angle is None:
        log.debug("Click at %s is off the ring", click)
        return None
    return hsv_to_hex(angle, 1, 1)
