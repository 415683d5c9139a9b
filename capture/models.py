# capture/models.py
from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Literal, Dict, Union
from datetime import datetime, timezone

FieldName = Literal["name", "email", "honeypot"]
ValidationReason = Literal["empty", "too_short", "too_long", "malformed"]
Banner = Literal["success", "error"]

# Browser whitespace (String.prototype.trim, regex \s): includes U+FEFF,
# excludes the \x1c-\x1f separators that Python's str.strip() also drops.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim(raw: Optional[str]) -> str:
    return (raw or "").strip(WHITESPACE)


def iso_timestamp(now: datetime | None = None) -> str:
    """UTC, millisecond precision, Z suffix: 2026-10-17T08:30:00.000Z"""
    dt = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error: str = ""
    reason: Optional[ValidationReason] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, reason: ValidationReason, error: str) -> "ValidationResult":
        return cls(is_valid=False, error=error, reason=reason)


class FieldSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    honeypot: str = ""


class SubmissionPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    timestamp: str

    @classmethod
    def build(cls, snapshot: FieldSnapshot, now: datetime | None = None) -> "SubmissionPayload":
        return cls(
            name=trim(snapshot.name),
            email=trim(snapshot.email).lower(),
            timestamp=iso_timestamp(now),
        )


class DispatchOk(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: Literal[True] = True


class DispatchFault(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: Literal[False] = False
    error: str


SubmissionOutcome = Union[DispatchOk, DispatchFault]


class UIState(BaseModel):
    field_errors: Dict[str, str] = Field(default_factory=dict)
    banner: Optional[Banner] = None
    banner_message: str = ""
    submit_disabled: bool = False
    show_loader: bool = False
    success_in_view: bool = False
    focused_field: Optional[FieldName] = None
