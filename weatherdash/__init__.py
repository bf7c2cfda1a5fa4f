"""Browser weather dashboard on Open-Meteo, served with Streamlit."""

__version__ = "1.0.0"
