# connectors/sheets/client.py
from __future__ import annotations
import logging
import httpx
from typing import Optional

from capture.errors import TransportFault
from capture.models import DispatchFault, DispatchOk, SubmissionOutcome, SubmissionPayload

log = logging.getLogger(__name__)

SUBMIT_FAILED_MESSAGE = "Failed to process your request. Please try again."


class SheetsWebhookClient:
    """
    Posts leads to a Google Apps Script web app.

    The script's cross-origin response can't be consumed, so the response is
    treated as opaque: status and body are never read and the script's
    redirect is not followed. All we can tell apart is "dispatched" vs
    "transport fault"; a remote rejection looks like success.
    """

    def __init__(self, url: str, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self.timeout = timeout  # None = no timeout
        self.transport = transport

    async def _dispatch(self, payload: SubmissionPayload) -> None:
        headers = {"Content-Type": "application/json"}
        try:
            body = payload.model_dump_json().encode("utf-8")
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as cli:
                async with cli.stream("POST", self.url, content=body, headers=headers):
                    pass  # opaque: never read
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise TransportFault(f"{type(e).__name__}: {e}", url=self.url) from e

    async def submit(self, payload: SubmissionPayload) -> SubmissionOutcome:
        try:
            await self._dispatch(payload)
        except TransportFault as e:
            log.error("Submission error: %s", e)
            return DispatchFault(error=SUBMIT_FAILED_MESSAGE)
        return DispatchOk()
