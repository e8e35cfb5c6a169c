class DomainError(Exception):
    """Base class for all domain-level errors."""

    pass


class ValidateCodeError(DomainError):
    """A verification code could not be issued or validated.

    Every subclass is request-scoped: the caller reports it and moves on.
    """

    pass


class UnknownCodeType(ValidateCodeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unknown verification code type: {name!r}")
        self.name = name


class GeneratorNotFound(ValidateCodeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"verification code generator {name} does not exist")
        self.name = name


class ProcessorNotFound(ValidateCodeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"verification code processor {name} does not exist")
        self.name = name


class ParameterReadError(ValidateCodeError):
    """The request parameter exists but could not be read as a string."""

    def __init__(self, param: str, reason: str = "malformed value") -> None:
        super().__init__(f"failed to read request parameter {param!r}: {reason}")
        self.param = param


class EmptySubmittedCode(ValidateCodeError):
    def __init__(self, code_type: str) -> None:
        super().__init__(f"{code_type} verification code must not be empty")
        self.code_type = code_type


class NoStoredCode(ValidateCodeError):
    def __init__(self, code_type: str) -> None:
        super().__init__(f"{code_type} verification code does not exist")
        self.code_type = code_type


class CodeExpired(ValidateCodeError):
    def __init__(self, code_type: str) -> None:
        super().__init__(f"{code_type} verification code has expired")
        self.code_type = code_type


class CodeMismatch(ValidateCodeError):
    def __init__(self, code_type: str) -> None:
        super().__init__(f"{code_type} verification code does not match")
        self.code_type = code_type


class CodeDeliveryError(ValidateCodeError):
    """The code was generated but could not be delivered to the client."""

    pass
