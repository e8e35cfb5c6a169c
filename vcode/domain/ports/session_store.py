from __future__ import annotations

from typing import Optional, Protocol

from vcode.domain.entities import RequestContext, ValidateCode


class SessionStorePort(Protocol):
    async def set_attribute(
        self, context: RequestContext, key: str, value: ValidateCode
    ) -> None:
        """Store/replace `key` in the session of `context`."""

    async def get_attribute(
        self, context: RequestContext, key: str
    ) -> Optional[ValidateCode]:
        """Return the value stored under `key`, or None."""

    async def remove_attribute(self, context: RequestContext, key: str) -> None:
        """Delete `key` from the session; a missing key is not an error."""
