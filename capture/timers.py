# capture/timers.py
from __future__ import annotations
import asyncio
from typing import Any, Callable, Protocol


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], Any]) -> Any: ...


class LoopScheduler:
    """Non-blocking timers on the running asyncio loop."""

    def call_later(self, delay_ms: int, callback: Callable[[], Any]) -> asyncio.TimerHandle:
        loop = asyncio.get_running_loop()
        return loop.call_later(delay_ms / 1000, callback)
