"""Transient, auto-dismissing error notice.

The notice lives in ``st.session_state`` with its creation time. CSS keeps it
fully visible for NOTICE_DURATION_S and fades it out over NOTICE_FADE_S. The
faded element stays in the page, invisible, until the next rerun (any user
interaction); that rerun drops the notice from the session and stops
rendering it.
"""

from __future__ import annotations

import html
import time
from typing import Any

import streamlit as st

from weatherdash.config import NOTICE_DURATION_S, NOTICE_FADE_S

_STATE_KEY = "weatherdash_notice"


def show_notice(message: str) -> None:
    """Korvaa mahdollisen aiemman ilmoituksen uudella."""
    st.session_state[_STATE_KEY] = {"message": message, "shown_at": time.monotonic()}


def current_notice(now: float | None = None) -> dict[str, Any] | None:
    """Return the live notice, dropping it once it has fully faded."""
    notice = st.session_state.get(_STATE_KEY)
    if not notice:
        return None
    now = time.monotonic() if now is None else now
    if now - notice["shown_at"] >= NOTICE_DURATION_S + NOTICE_FADE_S:
        del st.session_state[_STATE_KEY]
        return None
    return notice


def notice_html(message: str, elapsed: float = 0.0) -> str:
    # jäljellä oleva näkyvyysaika: uudelleenpiirto ei saa nollata animaatiota
    delay = max(NOTICE_DURATION_S - elapsed, 0.0)
    return (
        "<div class='error-message show' "
        f"style='animation: notice-fade {NOTICE_FADE_S}s ease {delay:.2f}s forwards;'>"
        f"{html.escape(message)}</div>"
    )


def render_notice() -> None:
    notice = current_notice()
    if notice is None:
        return
    elapsed = time.monotonic() - notice["shown_at"]
    st.markdown(notice_html(notice["message"], elapsed), unsafe_allow_html=True)
