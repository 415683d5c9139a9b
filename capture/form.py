# capture/form.py
from __future__ import annotations
import logging
from typing import Optional
import httpx

from capture.analytics import track_event
from capture.context import FormContext, FormFields, SubmissionClient
from capture.delivery import FileDelivery
from capture.events import EventBus, FormEvent
from capture.orchestrator import SubmissionOrchestrator, SubmissionState
from capture.presenter import FormView
from capture.settings import Settings, check_configuration
from capture.timers import LoopScheduler, Scheduler
from capture.validators import validate_field
from connectors.sheets.client import SheetsWebhookClient

log = logging.getLogger(__name__)


class LandingForm:
    """
    One lead-capture form: its context, its event handlers and the
    triggers a visitor can fire (typing, blur, focus, submit).
    """

    def __init__(self, ctx: FormContext):
        self.ctx = ctx
        self.bus = EventBus()
        self.orchestrator = SubmissionOrchestrator(ctx)

        # logged when the submit fires, not when the attempt settles
        self.bus.on("submit", lambda e: track_event("form_submitted"))
        self.bus.on("submit", self.orchestrator.handle_submit)
        self.bus.on("blur", self._on_blur)
        self.bus.on("focusin", lambda e: track_event("form_focused"))

    @classmethod
    def create(
        cls,
        settings: Settings,
        *,
        client: Optional[SubmissionClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        scheduler: Optional[Scheduler] = None,
        delivery: Optional[FileDelivery] = None,
    ) -> "LandingForm":
        fields = FormFields()
        ctx = FormContext(
            fields=fields,
            view=FormView(fields),
            client=client or SheetsWebhookClient(
                settings.webhook_url, timeout=settings.webhook_timeout, transport=transport
            ),
            delivery=delivery or FileDelivery(settings.ebook_href, settings.ebook_filename),
            scheduler=scheduler or LoopScheduler(),
            settings=settings,
        )
        return cls(ctx)

    @property
    def state(self) -> SubmissionState:
        return self.orchestrator.state

    def mount(self) -> bool:
        configured = check_configuration(self.ctx.settings)
        self.ctx.view.focus("name")
        return configured

    def type(self, field: str, value: Optional[str]) -> None:
        self.ctx.fields.set(field, value)

    async def blur(self, field: str) -> None:
        await self.bus.emit(FormEvent(kind="blur", field=field))

    async def focus_in(self) -> None:
        await self.bus.emit(FormEvent(kind="focusin"))

    async def submit(self) -> bool:
        """Returns False when the submit control was disabled and nothing fired."""
        if self.ctx.view.state.submit_disabled:
            log.debug("submit ignored: control disabled")
            return False
        await self.bus.emit(FormEvent(kind="submit"))
        return True

    def _on_blur(self, event: FormEvent) -> None:
        if event.field not in ("name", "email"):
            return
        result = validate_field(event.field, self.ctx.fields.get(event.field))
        self.ctx.view.show_field_error(event.field, result.error)
