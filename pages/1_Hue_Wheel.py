import logging

import streamlit as st
from streamlit_image_coordinates import streamlit_image_coordinates

from huewheel.color_utils import color_swatch_html, is_hex_color
from huewheel.selection import color_for_click
from huewheel.wheel_geometry import (
    DEFAULT_COLOR,
    DEFAULT_SEGMENTS,
    DEFAULT_SIZE,
    DEFAULT_STROKE_WIDTH,
    wheel_spec_for_size,
)
from huewheel.wheel_image import wheel_image
from huewheel.wheel_svg import PRESET_COLORS, wheel_svg

log = logging.getLogger(__name__)

st.set_page_config(page_title="Hue Wheel", page_icon="\U0001f308", layout="wide")
st.title("\U0001f308 Hue Wheel")

# Session state defaults
if "wheel_color" not in st.session_state:
    st.session_state.wheel_color = DEFAULT_COLOR
if "wheel_last_click" not in st.session_state:
    st.session_state.wheel_last_click = None


def _select(color: str):
    st.session_state.wheel_color = color.lower()
    log.debug("Selected %s", st.session_state.wheel_color)


# Sidebar controls
with st.sidebar:
    st.subheader("Wheel")
    size = st.slider("Size", 120, 480, DEFAULT_SIZE, step=10, key="wheel_size")
    stroke_width = st.slider("Stroke width", 4, 60, DEFAULT_STROKE_WIDTH,
                             key="wheel_stroke")
    n_segments = st.slider("Segments", 6, 180, DEFAULT_SEGMENTS, step=6,
                           key="wheel_segments")

    st.markdown("---")
    st.subheader("Display")
    style = st.radio("Picker style", ["Wheel", "Swatch grid"],
                     key="wheel_style", horizontal=True)
    show_preview = st.checkbox("Show preview", value=True, key="wheel_preview")
    show_hex = st.checkbox("Show hex value", value=False, key="wheel_show_hex")

    st.markdown("---")
    # wheel_last_click is kept so the component's stale click is not replayed
    if st.button("Reset to red"):
        _select(DEFAULT_COLOR)
        st.rerun()

# Slider ranges keep stroke_width <= size / 2, so the ring is never degenerate
spec = wheel_spec_for_size(size, stroke_width)
selected = st.session_state.wheel_color

if style == "Wheel":
    st.info("Click anywhere on the ring to pick a hue.")
    img = wheel_image(spec, selected, n_segments)
    coords = streamlit_image_coordinates(img, key="wheel_click")

    click = (coords["x"], coords["y"]) if coords is not None else None
    color = color_for_click(spec, click, st.session_state.wheel_last_click)
    if click is not None:
        st.session_state.wheel_last_click = click
    if color is not None:
        _select(color)
        st.rerun()

    svg = wheel_svg(spec, selected, n_segments)
    st.download_button("Download SVG", svg, "hue_wheel.svg", "image/svg+xml")
else:
    st.subheader("Preset Colors")
    cols = st.columns(5)
    for idx, color in enumerate(PRESET_COLORS):
        with cols[idx % 5]:
            border = "3px solid #007bff" if color == selected else "2px solid #ddd"
            st.markdown(
                f'{color_swatch_html(color, 30, border)} `{color}`',
                unsafe_allow_html=True,
            )
            if st.button("Pick", key=f"preset_{idx}", disabled=(color == selected)):
                _select(color)
                st.rerun()

# Preview
if show_preview:
    st.markdown("---")
    preview = selected if is_hex_color(selected) else DEFAULT_COLOR
    label = f" **{selected.upper()}**" if show_hex else ""
    st.markdown(f"{color_swatch_html(preview, 48)}{label}", unsafe_allow_html=True)
