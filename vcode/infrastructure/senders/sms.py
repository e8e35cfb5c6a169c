from __future__ import annotations

import json

from vcode.domain.entities import RequestContext, ValidateCode
from vcode.domain.errors import ParameterReadError
from vcode.domain.ports.code_sender import CodeSenderPort
from vcode.domain.ports.sms_gateway import SmsGatewayPort

MOBILE_PARAM = "mobile"


class SmsCodeSender(CodeSenderPort):
    def __init__(self, gateway: SmsGatewayPort, *, mobile_param: str = MOBILE_PARAM) -> None:
        self._gateway = gateway
        self._mobile_param = mobile_param

    async def send(self, context: RequestContext, code: ValidateCode) -> None:
        mobile = context.get_param(self._mobile_param)
        if mobile is None or not mobile.strip():
            raise ParameterReadError(self._mobile_param, "required")
        await self._gateway.send(mobile=mobile.strip(), code=code.code)
        context.response.body = json.dumps({"status": "sent"}).encode("utf-8")
        context.response.media_type = "application/json"
