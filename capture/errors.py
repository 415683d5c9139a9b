# capture/errors.py
from __future__ import annotations

# Validation failures and spam hits are values / log lines, not exceptions.
# A remote rejection can't be seen at all (opaque response).


class LeadCaptureError(Exception):
    pass


class TransportFault(LeadCaptureError):
    """The webhook request could not be built, sent or completed."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url
