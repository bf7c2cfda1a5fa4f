# weatherdash/ui/controls.py
from __future__ import annotations

import ipaddress

import streamlit as st

from weatherdash.api.geolocation import locate
from weatherdash.api.models import Location, UnitSystem
from weatherdash.ui.notices import show_notice
from weatherdash.viewmodels.dashboard import DashboardController

CONTROLLER_KEY = "weatherdash_controller"
INPUT_KEY = "location_input"
FORM_KEY = "search_form"

UNIT_LABELS: dict[UnitSystem, str] = {
    UnitSystem.METRIC: "°C",
    UnitSystem.IMPERIAL: "°F",
}


def _loading():
    return st.spinner("Loading weather…")


def visitor_ip() -> str | None:
    """
    Selaimen julkinen IP-osoite pyynnöstä.

    Välityspalvelimen takana ensimmäinen X-Forwarded-For -osoite, muuten
    yhteyden osoite. None, kun selain on samalla koneella tai lähiverkossa.
    """
    forwarded = st.context.headers.get("X-Forwarded-For") or ""
    candidate = forwarded.split(",")[0].strip() or st.context.ip_address
    if not candidate:
        return None
    try:
        ip = ipaddress.ip_address(candidate)
    except ValueError:
        return None
    if ip.is_private or ip.is_loopback:
        return None
    return str(ip)


def _locate_visitor() -> Location:
    return locate(visitor_ip())


def get_controller() -> DashboardController:
    """Yksi ohjain per selainistunto (st.session_state)."""
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = DashboardController(
            geolocator=_locate_visitor,
            loading=_loading,
            notify=show_notice,
        )
    return st.session_state[CONTROLLER_KEY]


def _on_search(controller: DashboardController) -> None:
    query = st.session_state.get(INPUT_KEY, "")
    if controller.search(query):
        st.session_state[INPUT_KEY] = ""


def _on_unit(controller: DashboardController, unit: UnitSystem) -> None:
    controller.set_unit(unit)


def render_controls(controller: DashboardController) -> None:
    """Search form (Enter or button), geolocate button and the °C/°F toggle."""
    # lomake: Enter ja Hae-nappi lähettävät saman yhden haun
    with st.form(FORM_KEY, border=False):
        col_input, col_search = st.columns([6, 1.2], gap="small", vertical_alignment="bottom")
        with col_input:
            st.text_input(
                "Location",
                key=INPUT_KEY,
                placeholder="Search for a city…",
                label_visibility="collapsed",
            )
        with col_search:
            st.form_submit_button(
                "Search", key="search_btn", on_click=_on_search, args=(controller,)
            )

    col_locate, _, col_c, col_f = st.columns(
        [1.6, 5.4, 0.8, 0.8], gap="small", vertical_alignment="center"
    )
    with col_locate:
        st.button("📍 My location", key="locate_btn", on_click=controller.geolocate)

    for col, unit in ((col_c, UnitSystem.METRIC), (col_f, UnitSystem.IMPERIAL)):
        with col:
            st.button(
                UNIT_LABELS[unit],
                key=f"unit_{unit.value}",
                type="primary" if controller.unit is unit else "secondary",
                on_click=_on_unit,
                args=(controller, unit),
            )
