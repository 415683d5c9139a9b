# capture/spam.py
from __future__ import annotations
import logging

from capture.context import FormFields

log = logging.getLogger(__name__)

def is_spam(fields: FormFields) -> bool:
    """
    Honeypot check. The field is hidden from people, so any value at all
    (whitespace included) means something filled every input blindly.
    """
    if len(fields.honeypot) > 0:
        log.warning("Honeypot field was filled - likely spam")
        return True
    return False
