# weatherdash/ui/common.py
from __future__ import annotations

import html

import streamlit as st

from weatherdash.paths import asset_path


def load_css(file_name: str) -> None:
    path = asset_path(file_name)
    if not path.exists():
        return
    with path.open("r", encoding="utf-8") as f:
        inject_style(f.read())


def inject_style(css: str) -> None:
    """Lisää sivulle <style>-lohkon (teemat, ilmoitusten animaatio)."""
    st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)


def section_title(text: str, mt: int = 10, mb: int = 10) -> None:
    """Render a section title with customizable margins.

    Args:
        text: Title text (escaped).
        mt: Top margin in pixels (default: 10).
        mb: Bottom margin in pixels (default: 10).
    """
    st.markdown(
        f"<div class='section-title' style='margin:{mt}px 0 {mb}px 0'>{html.escape(text)}</div>",
        unsafe_allow_html=True,
    )


def card(title: str, body_html: str, height_dvh: int = 16) -> None:
    """Render a card with a title and HTML body.

    Args:
        title: Card title text (escaped).
        body_html: HTML content for the card body.
        height_dvh: Minimum height in dvh units (default: 16).
    """
    st.markdown(
        f"""
        <section class="card" style="min-height:{height_dvh}dvh; position:relative; overflow:hidden;">
          <div class="card-title">{html.escape(title)}</div>
          <div class="card-body">{body_html}</div>
        </section>
        """,
        unsafe_allow_html=True,
    )
