# capture/analytics.py
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

log = logging.getLogger(__name__)

def track_event(event_name: str, event_data: Optional[Dict[str, Any]] = None) -> None:
    # Log-only sink; swap in a real analytics service here if one is added.
    log.info("Event: %s %s", event_name, event_data or {})
