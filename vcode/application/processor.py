from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Callable

from vcode.application.registry import GeneratorRegistry, processor_name
from vcode.domain.code_type import CodeType
from vcode.domain.entities import RequestContext, utcnow
from vcode.domain.errors import (
    CodeExpired,
    CodeMismatch,
    EmptySubmittedCode,
    NoStoredCode,
)
from vcode.domain.ports.code_sender import CodeSenderPort
from vcode.domain.ports.session_store import SessionStorePort

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = "SESSION_KEY_FOR_CODE_"


class ValidateCodeProcessor:
    """
    Issues and checks the verification code of one CodeType.

    create():   generate -> store in session (overwrites) -> send
    validate(): read stored -> compare with the submitted parameter -> consume

    The read/check/remove sequence in validate() is not atomic: two concurrent
    validations of the same live code may both succeed.
    """

    def __init__(
        self,
        code_type: CodeType,
        *,
        generators: GeneratorRegistry,
        sender: CodeSenderPort,
        sessions: SessionStorePort,
        session_key_prefix: str = SESSION_KEY_PREFIX,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.code_type = code_type
        self._generators = generators
        self._sender = sender
        self._sessions = sessions
        self._prefix = session_key_prefix
        self._clock = clock

    @property
    def name(self) -> str:
        return processor_name(self.code_type)

    @property
    def session_key(self) -> str:
        return f"{self._prefix}{self.code_type.name.upper()}"

    async def create(self, context: RequestContext) -> None:
        # Rendering (e.g. captcha images) is CPU-bound; keep it off the event loop.
        code = await asyncio.to_thread(
            self._generators.generate, self.code_type, context
        )
        await self._sessions.set_attribute(context, self.session_key, code.bare())
        # A failed send leaves the stored code in place.
        await self._sender.send(context, code)
        logger.info(
            "verification code issued",
            extra={
                "code_type": self.code_type.name,
                "expire_time": code.expire_time.isoformat(),
            },
        )

    async def validate(self, context: RequestContext) -> None:
        key = self.session_key
        code_type = self.code_type.name

        code_in_session = await self._sessions.get_attribute(context, key)
        code_in_request = context.get_param(self.code_type.param_name_on_validate)

        if code_in_request is None or not code_in_request.strip():
            raise EmptySubmittedCode(code_type)

        if code_in_session is None:
            raise NoStoredCode(code_type)

        if code_in_session.is_expired(self._clock()):
            await self._sessions.remove_attribute(context, key)
            logger.info("verification code expired", extra={"code_type": code_type})
            raise CodeExpired(code_type)

        if code_in_session.code != code_in_request:
            # Entry stays; the client may retry until expiry.
            logger.warning(
                "verification code mismatch", extra={"code_type": code_type}
            )
            raise CodeMismatch(code_type)

        await self._sessions.remove_attribute(context, key)
        logger.info("verification code consumed", extra={"code_type": code_type})
