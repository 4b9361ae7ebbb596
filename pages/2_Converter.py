import streamlit as st

from huewheel.color_utils import (
    InvalidFormat,
    color_swatch_html,
    hex_to_hsv,
    hex_to_rgb,
    hsv_to_hex,
    hsv_to_rgb,
)

st.set_page_config(page_title="Converter", page_icon="\U0001f522", layout="wide")
st.title("\U0001f522 Converter")

# ── Hex → RGB / HSV ──
st.subheader("Inspect a Hex Color")
default_hex = st.session_state.get("wheel_color", "#ff0000")
hex_in = st.text_input("Hex color (#RRGGBB)", default_hex).strip()

try:
    rgb = hex_to_rgb(hex_in)
    hsv = hex_to_hsv(hex_in)
except InvalidFormat as e:
    st.error(str(e))
else:
    canonical = hex_in.lower()
    st.markdown(
        f'{color_swatch_html(canonical, 40)} `{canonical}` &nbsp; (display: **{canonical.upper()}**)',
        unsafe_allow_html=True,
    )
    col1, col2 = st.columns(2)
    with col1:
        st.write(f"RGB: {rgb.r}, {rgb.g}, {rgb.b}")
    with col2:
        st.write(f"HSV: {hsv.h:.1f}°, {hsv.s:.3f}, {hsv.v:.3f}")

# ── HSV → hex ──
st.markdown("---")
st.subheader("Build from HSV")
h = st.slider("Hue", 0.0, 359.0, 0.0, step=1.0)
s = st.slider("Saturation", 0.0, 1.0, 1.0, step=0.01)
v = st.slider("Value", 0.0, 1.0, 1.0, step=0.01)

out_hex = hsv_to_hex(h, s, v)
r, g, b = hsv_to_rgb(h, s, v)
st.markdown(
    f'{color_swatch_html(out_hex, 40)} `{out_hex}` &nbsp; rgb({r}, {g}, {b})',
    unsafe_allow_html=True,
)
