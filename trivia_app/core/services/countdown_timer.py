"""Countdown clock for a quiz session and the tick-source interface that drives it."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class TickSource(Protocol):
    """Anything that can call ``callback`` once per fixed interval until stopped."""

    def start(self, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...

    def is_running(self) -> bool: ...


class CountdownTimer:
    """Whole-second countdown that fires its expiry callback exactly once.

    The timer does not own a clock. Something else (usually a ``TickSource``)
    calls :meth:`tick` once per second while the timer is active.
    """

    def __init__(
        self,
        duration_seconds: int,
        on_expired: Callable[[], None] | None = None,
        on_tick: Callable[[int], None] | None = None,
    ) -> None:
        if duration_seconds < 0:
            raise ValueError("Timer duration must not be negative.")
        self._duration_seconds = duration_seconds
        self._remaining_seconds = duration_seconds
        self._active: bool = False
        self._expired: bool = False
        self._on_expired = on_expired
        self._on_tick = on_tick

    @property
    def duration_seconds(self) -> int:
        return self._duration_seconds

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def has_expired(self) -> bool:
        return self._expired

    def start(self) -> None:
        if self._expired:
            return
        self._active = True

    def stop(self) -> None:
        self._active = False

    def tick(self) -> None:
        if not self._active:
            return

        if self._remaining_seconds > 0:
            self._remaining_seconds -= 1
            if self._on_tick is not None:
                self._on_tick(self._remaining_seconds)

        if self._remaining_seconds == 0:
            self._expire()

    def _expire(self) -> None:
        self._active = False
        if self._expired:
            return
        self._expired = True
        logger.info("Countdown of %ss expired", self._duration_seconds)
        if self._on_expired is not None:
            self._on_expired()
