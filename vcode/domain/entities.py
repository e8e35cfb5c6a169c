from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

from vcode.domain.errors import ParameterReadError


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ValidateCode:
    code: str
    expire_time: datetime

    @classmethod
    def expiring_in(
        cls, code: str, seconds: int, *, now: datetime | None = None, **extra: Any
    ) -> "ValidateCode":
        """Build a code that expires `seconds` after `now` (defaults to the current UTC time)."""
        start = now or utcnow()
        return cls(code=code, expire_time=start + timedelta(seconds=seconds), **extra)

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or utcnow()) >= self.expire_time

    def bare(self) -> "ValidateCode":
        """Only code + expiry; what gets written to the session."""
        return ValidateCode(code=self.code, expire_time=self.expire_time)


@dataclass
class ImageCode(ValidateCode):
    image: bytes = b""


@dataclass
class CodeResponse:
    """Outbound slot a sender writes into; the transport layer renders it."""

    body: bytes | None = None
    media_type: str = "application/json"
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class RequestContext:
    """Read-only view of an inbound request plus the session it belongs to."""

    session_id: str
    params: Mapping[str, Any] = field(default_factory=dict)
    response: CodeResponse = field(default_factory=CodeResponse)

    def get_param(self, name: str) -> str | None:
        """
        First value of a request parameter, None if absent.
        Raises ParameterReadError if the bound value is not text.
        """
        raw = self.params.get(name)
        if raw is None:
            return None
        if isinstance(raw, str):
            return raw
        if isinstance(raw, Sequence) and not isinstance(raw, (bytes, bytearray)):
            if not raw:
                return None
            first = raw[0]
            if isinstance(first, str):
                return first
        raise ParameterReadError(name)

    def get_int_param(self, name: str, default: int) -> int:
        value = self.get_param(name)
        if value is None or not value.strip():
            return default
        try:
            return int(value)
        except ValueError:
            raise ParameterReadError(name, "not an integer") from None
