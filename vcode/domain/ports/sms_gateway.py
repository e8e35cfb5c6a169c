from __future__ import annotations

from typing import Protocol


class SmsGatewayPort(Protocol):
    async def send(self, *, mobile: str, code: str) -> None:
        """Send an SMS carrying `code` to `mobile`."""
