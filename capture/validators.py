import re
from typing import Optional

from capture.models import WHITESPACE, ValidationResult, trim

_WS = re.escape(WHITESPACE)

# Deliberately permissive: accepts some invalid addresses rather than reject real ones.
EMAIL_RE = re.compile(rf"^[^@{_WS}]+@[^@{_WS}]+\.[^@{_WS}]+$")

NAME_MIN = 2
NAME_MAX = 100
EMAIL_MAX = 254

def validate_name(raw: Optional[str]) -> ValidationResult:
    name = trim(raw)

    if not name:
        return ValidationResult.fail("empty", "Name is required")
    if len(name) < NAME_MIN:
        return ValidationResult.fail("too_short", f"Name must be at least {NAME_MIN} characters")
    if len(name) > NAME_MAX:
        return ValidationResult.fail("too_long", f"Name must be less than {NAME_MAX} characters")

    return ValidationResult.ok()

def validate_email(raw: Optional[str]) -> ValidationResult:
    email = trim(raw).lower()

    if not email:
        return ValidationResult.fail("empty", "Email is required")
    if not EMAIL_RE.match(email):
        return ValidationResult.fail("malformed", "Please enter a valid email address")
    if len(email) > EMAIL_MAX:
        return ValidationResult.fail("too_long", "Email is too long")

    return ValidationResult.ok()

VALIDATORS = {
    "name": validate_name,
    "email": validate_email,
}

def validate_field(field: str, raw: Optional[str]) -> ValidationResult:
    """Validate one visible field by name. Raises KeyError for anything else."""
    return VALIDATORS[field](raw)
