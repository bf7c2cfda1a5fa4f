# tests/test_utils.py

import logging

import weatherdash.utils as utils


def test_report_error_logs(caplog):
    with caplog.at_level(logging.ERROR, logger="weatherdash"):
        utils.report_error("geocoding", RuntimeError("boom"))

    assert "geocoding: RuntimeError: boom" in caplog.text


def test_report_error_shows_caption_in_dev(monkeypatch):
    captions: list[str] = []
    monkeypatch.setattr(utils, "DEV", True)
    monkeypatch.setattr(utils.st, "caption", captions.append)

    utils.report_error("ctx", ValueError("bad"))

    assert captions == ["⚠ ctx: ValueError: bad"]


def test_report_error_silent_in_ui_outside_dev(monkeypatch):
    monkeypatch.setattr(utils, "DEV", False)
    monkeypatch.setattr(utils.st, "caption", lambda *a: (_ for _ in ()).throw(AssertionError))

    utils.report_error("ctx", ValueError("bad"))
