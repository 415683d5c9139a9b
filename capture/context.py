# capture/context.py
from __future__ import annotations
from typing import TYPE_CHECKING, Protocol

from capture.models import FieldSnapshot, SubmissionOutcome, SubmissionPayload

if TYPE_CHECKING:
    from capture.delivery import FileDelivery
    from capture.presenter import Presenter
    from capture.settings import Settings
    from capture.timers import Scheduler

FIELDS = ("name", "email", "honeypot")


class FormFields:
    """Current raw values of the three input controls."""

    def __init__(self, name: str = "", email: str = "", honeypot: str = ""):
        self.name = name
        self.email = email
        self.honeypot = honeypot

    def set(self, field: str, value: str | None) -> None:
        if field not in FIELDS:
            raise KeyError(field)
        setattr(self, field, value or "")

    def get(self, field: str) -> str:
        if field not in FIELDS:
            raise KeyError(field)
        return getattr(self, field)

    def snapshot(self) -> FieldSnapshot:
        return FieldSnapshot(name=self.name, email=self.email, honeypot=self.honeypot)

    def clear(self) -> None:
        self.name = ""
        self.email = ""
        self.honeypot = ""


class SubmissionClient(Protocol):
    async def submit(self, payload: SubmissionPayload) -> SubmissionOutcome: ...


class FormContext:
    """Everything one landing form needs, built once per form."""

    def __init__(
        self,
        fields: FormFields,
        view: "Presenter",
        client: SubmissionClient,
        delivery: "FileDelivery",
        scheduler: "Scheduler",
        settings: "Settings",
    ):
        self.fields = fields
        self.view = view
        self.client = client
        self.delivery = delivery
        self.scheduler = scheduler
        self.settings = settings
