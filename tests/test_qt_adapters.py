"""Tests for the Qt tick driver, dispatcher and dialog helpers."""

from PySide6.QtCore import QCoreApplication

from trivia_app.ui import dialog_helpers
from trivia_app.ui.dispatcher import QtDispatcher
from trivia_app.ui.tick_driver import QtTickDriver


def test_tick_driver_forwards_timeouts(qt_app):
    driver = QtTickDriver(interval_ms=1000)
    ticks = []

    driver.start(lambda: ticks.append(1))
    assert driver.is_running()

    driver._handle_timeout()
    driver._handle_timeout()
    assert ticks == [1, 1]


def test_tick_driver_stop_cancels_subscription(qt_app):
    driver = QtTickDriver(interval_ms=1000)
    ticks = []
    driver.start(lambda: ticks.append(1))

    driver.stop()
    driver.stop()
    driver._handle_timeout()

    assert not driver.is_running()
    assert ticks == []


def test_dispatcher_runs_callbacks_on_event_loop(qt_app):
    dispatcher = QtDispatcher()
    calls = []

    dispatcher(lambda: calls.append("ran"))
    assert calls == []

    QCoreApplication.processEvents()
    assert calls == ["ran"]


def test_show_error_opens_critical_box(qt_app, monkeypatch):
    calls = []
    monkeypatch.setattr(
        dialog_helpers.QMessageBox,
        "critical",
        lambda parent, title, message: calls.append((parent, title, message)),
    )

    dialog_helpers.show_error(None, "Loading failed", "Could not load questions: timeout")

    assert calls == [(None, "Loading failed", "Could not load questions: timeout")]
