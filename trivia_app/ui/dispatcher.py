"""Delivers callables from worker threads onto the Qt GUI thread."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, Qt, Signal


class QtDispatcher(QObject):
    """Queued-signal bridge used as the question loader's dispatcher."""

    _invoke = Signal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._invoke.connect(self._run, Qt.QueuedConnection)

    def __call__(self, callback: Callable[[], None]) -> None:
        self._invoke.emit(callback)

    def _run(self, callback: Callable[[], None]) -> None:
        callback()
