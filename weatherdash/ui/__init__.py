"""Expose dashboard render functions."""

from .card_weather import card_weather
from .controls import get_controller, render_controls
from .notices import render_notice, show_notice

__all__ = [
    "card_weather",
    "get_controller",
    "render_controls",
    "render_notice",
    "show_notice",
]
