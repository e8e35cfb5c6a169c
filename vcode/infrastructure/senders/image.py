from __future__ import annotations

from vcode.domain.entities import ImageCode, RequestContext, ValidateCode
from vcode.domain.ports.code_sender import CodeSenderPort


class ImageCodeSender(CodeSenderPort):
    """Writes the rendered captcha into the response slot."""

    async def send(self, context: RequestContext, code: ValidateCode) -> None:
        if not isinstance(code, ImageCode):
            raise TypeError(f"expected ImageCode, got {type(code).__name__}")
        context.response.body = code.image
        context.response.media_type = "image/png"
        context.response.headers["Cache-Control"] = "no-store"
