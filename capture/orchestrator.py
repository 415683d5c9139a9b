# capture/orchestrator.py
from __future__ import annotations
import logging
from enum import Enum
from typing import Any

from capture.context import FormContext
from capture.events import FormEvent
from capture.models import DispatchOk, SubmissionPayload
from capture.spam import is_spam
from capture.validators import validate_email, validate_name

log = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    REJECTED = "rejected"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SubmissionOrchestrator:
    """Runs one submission attempt per submit event, end to end."""

    def __init__(self, ctx: FormContext):
        self.ctx = ctx
        self.state = SubmissionState.IDLE
        self.last_payload: SubmissionPayload | None = None
        self._reenable_timer: Any = None

    async def handle_submit(self, event: FormEvent) -> SubmissionState:
        view = self.ctx.view

        # 1) no navigation, no stale banner
        event.prevent_default()
        view.hide_form_messages()
        self.state = SubmissionState.VALIDATING

        # 2) bots get the same success path, minus the network call
        if is_spam(self.ctx.fields):
            self._succeed(deliver=self.ctx.settings.spam_receives_download)
            return self.state

        # 3) validate, first failure wins
        snapshot = self.ctx.fields.snapshot()
        name_check = validate_name(snapshot.name)
        if not name_check.is_valid:
            view.show_field_error("name", name_check.error)
            self.state = SubmissionState.REJECTED
            return self.state

        email_check = validate_email(snapshot.email)
        if not email_check.is_valid:
            view.show_field_error("email", email_check.error)
            self.state = SubmissionState.REJECTED
            return self.state

        # 4) lock the form before anything goes on the wire
        view.show_field_error("name", "")
        view.show_field_error("email", "")
        self._cancel_reenable()
        view.set_submitting(True)
        self.state = SubmissionState.SUBMITTING

        # 5) dispatch
        payload = SubmissionPayload.build(snapshot)
        self.last_payload = payload
        outcome = await self.ctx.client.submit(payload)

        # 6/7) outcome
        if isinstance(outcome, DispatchOk):
            self._succeed(deliver=True)
        else:
            view.show_form_error(outcome.error)
            view.set_submitting(False)
            self.state = SubmissionState.FAILED
        return self.state

    def _succeed(self, deliver: bool) -> None:
        view = self.ctx.view
        cfg = self.ctx.settings
        scheduler = self.ctx.scheduler

        view.show_form_success()
        self._reset_form()
        if deliver:
            scheduler.call_later(cfg.download_delay_ms, self.ctx.delivery.trigger)
        view.scroll_success_into_view()
        self.state = SubmissionState.SUCCEEDED

    def _reset_form(self) -> None:
        # fields first, then the delayed re-enable
        self.ctx.view.reset_fields()
        self._cancel_reenable()
        self._reenable_timer = self.ctx.scheduler.call_later(
            self.ctx.settings.success_reenable_delay_ms,
            lambda: self.ctx.view.set_submitting(False),
        )

    def _cancel_reenable(self) -> None:
        # a leftover timer must not unlock a newer attempt still in flight
        if self._reenable_timer is not None:
            self._reenable_timer.cancel()
            self._reenable_timer = None
