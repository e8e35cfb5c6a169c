from __future__ import annotations

from typing import Dict, Optional

import httpx

from vcode.domain.errors import CodeDeliveryError
from vcode.domain.ports.sms_gateway import SmsGatewayPort


class HttpSmsGateway(SmsGatewayPort):
    def __init__(
        self,
        base_url: str,
        *,
        client: Optional[httpx.AsyncClient] = None,
        auth_token: str | None = None,
        timeout: float = 5.0,
        send_path: str = "/sms",
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._send_path = send_path if send_path.startswith("/") else f"/{send_path}"
        self._auth_token = auth_token
        self._owns_client: bool = client is None
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(timeout=timeout)

    async def send(self, *, mobile: str, code: str) -> None:
        headers: Dict[str, str] = {}
        if self._auth_token:
            headers["Authorization"] = f"Bearer {self._auth_token}"

        url = f"{self._base_url}{self._send_path}"
        payload = {"to": mobile, "message": f"Your verification code is {code}"}

        try:
            resp = await self._client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise CodeDeliveryError(f"SMS gateway HTTP error: {e}") from e
        if not (200 <= resp.status_code < 300):
            text = resp.text[:200]
            raise CodeDeliveryError(f"SMS gateway responded {resp.status_code}: {text}")

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
