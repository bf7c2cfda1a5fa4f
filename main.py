# main.py
"""Main entry point for the weatherdash Streamlit application.

Run with: streamlit run main.py
"""

import streamlit as st

from weatherdash.logger_config import setup_logging
from weatherdash.ui import card_weather, get_controller, render_controls, render_notice
from weatherdash.ui.common import load_css

logger = setup_logging()


def main() -> None:
    """Initialize and render the weather dashboard."""
    st.set_page_config(
        page_title="Weather Dashboard",
        layout="wide",
        page_icon="🌤️",
    )
    load_css("style.css")

    controller = get_controller()
    # ensimmäinen ajo: paikannus tai oletuskaupunki
    controller.start()

    st.markdown("<header><h1>Weather Dashboard</h1></header>", unsafe_allow_html=True)
    render_controls(controller)
    render_notice()
    card_weather(controller)


if __name__ == "__main__":
    main()
