# weatherdash/ui/card_weather.py
from __future__ import annotations

import html
from collections.abc import Sequence
from typing import Any

import streamlit as st
from streamlit.components.v1 import html as st_html

from weatherdash.ui.common import card, inject_style, section_title
from weatherdash.utils import report_error
from weatherdash.viewmodels.dashboard import DashboardController
from weatherdash.viewmodels.weather import (
    CurrentView,
    ForecastItemView,
    build_current_view,
    build_forecast_view,
)

FORECAST_HEIGHT = 190

# teema → (taustagradientti, tekstin väri)
THEME_STYLES: dict[str, tuple[str, str]] = {
    "clear-sky": ("linear-gradient(135deg, #64b5f6, #1976d2)", "#ffffff"),
    "scattered-clouds": ("linear-gradient(135deg, #90caf9, #5c6bc0)", "#ffffff"),
    "shower-rain": ("linear-gradient(135deg, #bbdefb, #5c6bc0)", "#ffffff"),
    "rain": ("linear-gradient(135deg, #bbdefb, #5c6bc0)", "#ffffff"),
    "thunderstorm": ("linear-gradient(135deg, #9fa8da, #5c6bc0)", "#ffffff"),
    "snow": ("linear-gradient(135deg, #e1f5fe, #b3e5fc)", "#333333"),
    "mist": ("linear-gradient(135deg, #e0e0e0, #9e9e9e)", "#333333"),
}


def theme_css(theme: str | None) -> str | None:
    if theme is None or theme not in THEME_STYLES:
        return None
    gradient, color = THEME_STYLES[theme]
    return (
        f".stApp {{ background: {gradient}; color: {color}; }}\n"
        f".stApp .weather-details, .stApp .card {{ color: {color}; }}"
    )


def apply_theme(theme: str | None) -> None:
    """Vaihtaa sivun taustan säätilan mukaan; None → oletustausta."""
    css = theme_css(theme)
    if css is not None:
        inject_style(css)


def current_html(view: CurrentView) -> str:
    e = html.escape
    return f"""
        <section class="card current-weather">
          <div class="location">{e(view.location)}</div>
          <div class="current-main">
            <span class="weather-icon">{view.glyph}</span>
            <span class="current-temp">{e(view.temperature)}</span>
          </div>
          <div class="weather-condition">{e(view.description)}</div>
          <div class="weather-details">
            <div><span class="hint">Feels like</span> {e(view.feels_like)}</div>
            <div><span class="hint">Wind</span> {e(view.wind)}</div>
            <div><span class="hint">Humidity</span> {e(view.humidity)}</div>
            <div><span class="hint">Pressure</span> {e(view.pressure)}</div>
          </div>
        </section>
    """


def render_current(view: CurrentView) -> None:
    st.markdown(current_html(view), unsafe_allow_html=True)


def forecast_html(items: Sequence[ForecastItemView]) -> str:
    def cell(item: ForecastItemView) -> str:
        return f"""
            <div class="forecast-item">
              <div class="forecast-day">{item.weekday}</div>
              <div class="forecast-icon">{item.glyph}</div>
              <div class="forecast-condition">{html.escape(item.condition)}</div>
              <div class="forecast-temp">
                <span class="temp-max">{item.temp_max}</span>
                <span class="temp-min">{item.temp_min}</span>
              </div>
            </div>
        """

    return (
        """
        <!doctype html>
        <html><head><meta charset="utf-8">
        <style>
          :root { --fg:#e7eaee; --bg2:rgba(255,255,255,0.12); }
          html,body {margin:0;padding:0;background:transparent;color:var(--fg);
                     font-family:ui-sans-serif,system-ui,-apple-system,Segoe UI,Roboto,Ubuntu;}
          .forecast-row {display:grid;grid-template-columns:repeat(5,minmax(88px,1fr));
                         gap:10px;align-items:stretch;padding:4px 2px;}
          .forecast-item {display:grid;grid-template-rows:auto 1fr auto auto;
                          align-items:center;justify-items:center;
                          background:var(--bg2);border-radius:14px;
                          padding:8px 6px;min-height:140px;}
          .forecast-day{font-size:.95rem;font-weight:600;}
          .forecast-icon{font-size:2.2rem;line-height:1;}
          .forecast-condition{font-size:.85rem;opacity:.85;}
          .forecast-temp{font-size:1rem;margin-top:4px;}
          .temp-min{opacity:.7;margin-left:6px;}
        </style></head><body>
          <div class="forecast-row">
        """
        + "".join(cell(item) for item in items)
        + "</div></body></html>"
    )


def render_forecast(items: Sequence[ForecastItemView], target: Any = None) -> None:
    """Tyhjentää aiemman ennusterivin ja piirtää annetut päivät tilalle."""
    target = target if target is not None else st.empty()
    target.empty()
    if not items:
        return
    with target.container():
        st_html(forecast_html(items), height=FORECAST_HEIGHT, scrolling=False)


def card_weather(controller: DashboardController) -> None:
    """Render the current-weather card and the forecast strip for the last fetched report."""
    report = controller.report
    if report is None:
        card(
            "Weather",
            "<span class='hint'>Search for a city to see the weather.</span>",
            height_dvh=15,
        )
        return

    try:
        view = build_current_view(report)
        apply_theme(view.theme)
        render_current(view)

        items = build_forecast_view(report.forecast, report.units)
        if items:
            section_title(f"{len(items)}-day forecast", mb=3)
        render_forecast(items)
    except Exception as e:
        report_error("card_weather", e)
        card("Weather", f"<span class='hint'>Error: {html.escape(str(e))}</span>", height_dvh=15)
