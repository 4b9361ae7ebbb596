import streamlit as st

st.set_page_config(page_title="HueWheel", page_icon="\U0001f3a8", layout="wide")

st.markdown("""<style>
    .block-container { max-width: 1000px; }
    @media (max-width: 640px) {
        .block-container { padding: 1rem; }
    }
</style>""", unsafe_allow_html=True)

st.title("\U0001f3a8 HueWheel")
st.markdown("A circular hue picker with HSV, RGB and hex conversion.")

st.markdown("---")

col1, col2 = st.columns(2)

with col1:
    st.subheader("\U0001f308 Hue Wheel")
    st.write("Click the ring to pick a hue, or choose from a grid of preset swatches.")

with col2:
    st.subheader("\U0001f522 Converter")
    st.write("Inspect a hex color as RGB and HSV, or build one from HSV values.")

st.markdown("---")
st.caption("Use the sidebar to navigate between pages.")
