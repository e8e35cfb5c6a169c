from __future__ import annotations

from typing import Protocol

from vcode.domain.entities import RequestContext, ValidateCode


class CodeGeneratorPort(Protocol):
    def generate(self, context: RequestContext) -> ValidateCode:
        """
        Produce a fresh code for this request.
        The expiry is generator policy; callers must not assume a duration.
        """
