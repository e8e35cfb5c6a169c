from __future__ import annotations

import secrets

from vcode.domain.entities import RequestContext, ValidateCode
from vcode.domain.ports.code_generator import CodeGeneratorPort


def generate_numeric_code(length: int) -> str:
    """Zero-padded numeric code of `length` digits."""
    return f"{secrets.randbelow(10**length):0{length}d}"


class SmsCodeGenerator(CodeGeneratorPort):
    def __init__(self, *, length: int = 6, ttl_seconds: int = 300) -> None:
        if length < 1:
            raise ValueError("length must be positive")
        self._length = length
        self._ttl = ttl_seconds

    def generate(self, context: RequestContext) -> ValidateCode:
        return ValidateCode.expiring_in(generate_numeric_code(self._length), self._ttl)
