from __future__ import annotations

import logging

from vcode.domain.ports.sms_gateway import SmsGatewayPort

logger = logging.getLogger(__name__)


def mask(value: str, keep: int = 2) -> str:
    if len(value) <= keep:
        return "*" * len(value)
    return "*" * (len(value) - keep) + value[-keep:]


class LogSmsGateway(SmsGatewayPort):
    """Development gateway: nothing leaves the process."""

    async def send(self, *, mobile: str, code: str) -> None:
        logger.info(
            "sms send (log gateway)",
            extra={"mobile": mask(mobile, keep=4), "code": mask(code)},
        )
