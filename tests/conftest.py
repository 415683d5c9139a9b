"""Pytest configuration and shared fixtures"""
import asyncio
from typing import Any, Callable, List, Optional

import pytest

from capture.delivery import FileDelivery
from capture.form import LandingForm
from capture.models import DispatchFault, DispatchOk, SubmissionPayload
from capture.settings import Settings

WEBHOOK = "https://script.google.com/macros/s/test-deployment/exec"


class FakeTimer:
    def __init__(self, scheduler, entry):
        self.scheduler = scheduler
        self.entry = entry
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True
        if self.entry in self.scheduler.pending:
            self.scheduler.pending.remove(self.entry)


class FakeScheduler:
    """Manual clock: timers fire only when advance() passes their due time"""

    def __init__(self):
        self.now = 0
        self._seq = 0
        self.pending: List[tuple] = []

    def call_later(self, delay_ms: int, callback: Callable[[], Any]):
        self._seq += 1
        entry = (self.now + delay_ms, self._seq, delay_ms, callback)
        self.pending.append(entry)
        return FakeTimer(self, entry)

    def delays(self) -> List[int]:
        return [p[2] for p in self.pending]

    def advance(self, ms: int) -> None:
        self.now += ms
        due = sorted(p for p in self.pending if p[0] <= self.now)
        self.pending = [p for p in self.pending if p[0] > self.now]
        for _, _, _, callback in due:
            callback()


class RecordingClient:
    """Stands in for the webhook client; optionally blocks until released"""

    def __init__(self, outcome=None, gate: Optional[asyncio.Event] = None):
        self.outcome = outcome or DispatchOk()
        self.gate = gate
        self.calls: List[SubmissionPayload] = []
        self.on_call: Optional[Callable[[SubmissionPayload], None]] = None

    async def submit(self, payload: SubmissionPayload):
        self.calls.append(payload)
        if self.on_call:
            self.on_call(payload)
        if self.gate is not None:
            await self.gate.wait()
        return self.outcome


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, GOOGLE_SCRIPT_URL=WEBHOOK)


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def client() -> RecordingClient:
    return RecordingClient()


@pytest.fixture
def failing_client() -> RecordingClient:
    return RecordingClient(outcome=DispatchFault(error="Failed to process your request. Please try again."))


@pytest.fixture
def make_form(test_settings, scheduler):
    """Build a LandingForm around a given client with the fake clock"""

    def _make(client, settings: Optional[Settings] = None) -> LandingForm:
        cfg = settings or test_settings
        return LandingForm.create(
            cfg,
            client=client,
            scheduler=scheduler,
            delivery=FileDelivery(cfg.ebook_href, cfg.ebook_filename),
        )

    return _make
