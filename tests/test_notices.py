from __future__ import annotations

import weatherdash.ui.notices as notices
from weatherdash.config import NOTICE_DURATION_S, NOTICE_FADE_S


class DummySt:
    def __init__(self):
        self.session_state: dict[str, object] = {}
        self.markdowns: list[str] = []

    def markdown(self, html, unsafe_allow_html=False):
        self.markdowns.append(html)


def test_show_notice_replaces_previous(monkeypatch):
    dummy = DummySt()
    monkeypatch.setattr(notices, "st", dummy)
    monkeypatch.setattr(notices.time, "monotonic", lambda: 100.0)

    notices.show_notice("first")
    notices.show_notice("second")

    assert notices.current_notice(now=100.0)["message"] == "second"


def test_notice_visible_until_faded_then_removed(monkeypatch):
    dummy = DummySt()
    monkeypatch.setattr(notices, "st", dummy)
    monkeypatch.setattr(notices.time, "monotonic", lambda: 100.0)
    notices.show_notice("Unable to fetch weather data. Please try again.")

    assert notices.current_notice(now=100.0 + NOTICE_DURATION_S - 0.1) is not None
    assert notices.current_notice(now=100.0 + NOTICE_DURATION_S + NOTICE_FADE_S) is None
    assert dummy.session_state == {}


def test_notice_html_fades_after_remaining_time():
    html = notices.notice_html("<oops>", elapsed=2.0)
    assert "&lt;oops&gt;" in html
    assert f"notice-fade {NOTICE_FADE_S}s ease 3.00s forwards" in html

    late = notices.notice_html("x", elapsed=99.0)
    assert "ease 0.00s" in late


def test_render_notice_draws_only_live_notice(monkeypatch):
    dummy = DummySt()
    monkeypatch.setattr(notices, "st", dummy)

    notices.render_notice()
    assert dummy.markdowns == []

    monkeypatch.setattr(notices.time, "monotonic", lambda: 50.0)
    notices.show_notice("hello")
    notices.render_notice()
    assert "hello" in dummy.markdowns[0]
    assert "error-message" in dummy.markdowns[0]


def test_faded_notice_is_not_rendered_on_next_rerun(monkeypatch):
    dummy = DummySt()
    monkeypatch.setattr(notices, "st", dummy)
    monkeypatch.setattr(notices.time, "monotonic", lambda: 100.0)
    notices.show_notice("Unable to fetch weather data. Please try again.")

    monkeypatch.setattr(
        notices.time, "monotonic", lambda: 100.0 + NOTICE_DURATION_S + NOTICE_FADE_S + 0.1
    )
    notices.render_notice()

    assert dummy.markdowns == []
    assert notices._STATE_KEY not in dummy.session_state
