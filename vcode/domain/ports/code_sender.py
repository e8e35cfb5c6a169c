from __future__ import annotations

from typing import Protocol

from vcode.domain.entities import RequestContext, ValidateCode


class CodeSenderPort(Protocol):
    async def send(self, context: RequestContext, code: ValidateCode) -> None:
        """Deliver the code to the client. Raises on delivery failure."""
