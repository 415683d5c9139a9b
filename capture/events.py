# capture/events.py
from __future__ import annotations
import inspect
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List, Literal, Optional, Union
from pydantic import BaseModel

EventKind = Literal["submit", "blur", "focusin"]


class FormEvent(BaseModel):
    kind: EventKind
    field: Optional[str] = None
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


Handler = Callable[[FormEvent], Union[Any, Awaitable[Any]]]


class EventBus:
    """Handlers run in registration order; async ones are awaited in turn."""

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = defaultdict(list)

    def on(self, kind: EventKind, handler: Handler) -> None:
        self._handlers[kind].append(handler)

    async def emit(self, event: FormEvent) -> FormEvent:
        for handler in list(self._handlers.get(event.kind, [])):
            result = handler(event)
            if inspect.isawaitable(result):
                await result
        return event
