"""Qt timer that drives a quiz session's countdown."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer

from trivia_app.constants.quiz_constants import TICK_INTERVAL_MS


class QtTickDriver(QObject):
    """Tick source backed by a repeating ``QTimer`` on the GUI thread."""

    def __init__(self, interval_ms: int = TICK_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._callback: Callable[[], None] | None = None
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._handle_timeout)

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        if not self._timer.isActive():
            self._timer.start()

    def stop(self) -> None:
        self._callback = None
        if self._timer.isActive():
            self._timer.stop()

    def is_running(self) -> bool:
        return self._timer.isActive()

    def _handle_timeout(self) -> None:
        if self._callback is not None:
            self._callback()
