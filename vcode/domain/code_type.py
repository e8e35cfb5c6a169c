from __future__ import annotations

from enum import Enum, unique

from vcode.domain.errors import UnknownCodeType


@unique
class CodeType(Enum):
    """Supported verification code kinds.

    The value is the name of the request parameter that carries the
    user-submitted code when validating.
    """

    SMS = "smsCode"
    IMAGE = "imageCode"

    @property
    def param_name_on_validate(self) -> str:
        return self.value

    @classmethod
    def resolve(cls, name: str) -> "CodeType":
        key = (name or "").strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise UnknownCodeType(name) from None

    def __str__(self) -> str:
        return self.name
