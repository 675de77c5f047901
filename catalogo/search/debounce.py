"""
Cancellable delayed callback on the running asyncio loop.
"""
from __future__ import annotations

import asyncio
from typing import Callable, Optional

from catalogo.config import DEBOUNCE_MS


class Debouncer:
    """Runs callback once input has been quiet for `delay` seconds.

    Each trigger() cancels the pending call and schedules a new one, so only
    the arguments of the most recent trigger are ever delivered.
    """

    def __init__(self, callback: Callable[..., None], delay: float = DEBOUNCE_MS / 1000) -> None:
        self.callback = callback
        self.delay = delay
        self._handle: Optional[asyncio.TimerHandle] = None

    def trigger(self, *args) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, args)

    def _fire(self, args: tuple) -> None:
        self._handle = None
        self.callback(*args)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    @property
    def pending(self) -> bool:
        return self._handle is not None
