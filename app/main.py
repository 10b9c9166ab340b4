import streamlit as st

from identicon import generate_identicon
from identicon.config import IdenticonConfig, configure_logging
from identicon.renderer import get_backend, render_canvas, render_image
from identicon.stages import GRID_WIDTH

config = IdenticonConfig()
configure_logging(config)
backend = get_backend(config.backend)

st.set_page_config(layout="wide", page_title="Identicon")

if "input" not in st.session_state:
    st.session_state["input"] = "banana"

text: str = st.text_input("Input", key="input")
image = generate_identicon(text)

left_col, right_col = st.columns([0.5, 0.5])

with left_col:
    st.image(render_canvas(image, backend, config), width=250)
    st.download_button(
        "⬇️ Download",
        data=render_image(image, backend, config),
        file_name=f"{text or 'identicon'}.{config.extension}",
        use_container_width=True,
    )

with right_col:
    r, g, b = image.color or (0, 0, 0)
    st.info(f"rgb({r}, {g}, {b})", icon="🎨")
    st.code(" ".join(f"{byte:02x}" for byte in image.hex), language=None)

    filled = set(image.grid)
    rows = [
        "".join(
            "█" if row * GRID_WIDTH + col in filled else "·"
            for col in range(GRID_WIDTH)
        )
        for row in range(GRID_WIDTH)
    ]
    st.code("\n".join(rows), language=None)
