from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from vcode.domain.code_type import CodeType
from vcode.domain.entities import RequestContext, ValidateCode
from vcode.domain.errors import (
    GeneratorNotFound,
    ProcessorNotFound,
    UnknownCodeType,
)
from vcode.domain.ports.code_generator import CodeGeneratorPort

if TYPE_CHECKING:
    from vcode.application.processor import ValidateCodeProcessor


def generator_name(code_type: CodeType) -> str:
    return f"{code_type.name.lower()}Generator"


def processor_name(code_type: CodeType) -> str:
    return f"{code_type.name.lower()}Processor"


class GeneratorRegistry:
    """CodeType -> generator table. Frozen at construction."""

    def __init__(self, generators: Mapping[CodeType, CodeGeneratorPort]) -> None:
        self._generators = MappingProxyType(dict(generators))

    def __contains__(self, code_type: object) -> bool:
        return code_type in self._generators

    def get(self, code_type: CodeType) -> CodeGeneratorPort:
        generator = self._generators.get(code_type)
        if generator is None:
            raise GeneratorNotFound(generator_name(code_type))
        return generator

    def generate(self, code_type: CodeType, context: RequestContext) -> ValidateCode:
        return self.get(code_type).generate(context)


class ProcessorRegistry:
    """CodeType -> processor table. Frozen at construction."""

    def __init__(
        self, processors: Mapping[CodeType, "ValidateCodeProcessor"]
    ) -> None:
        for code_type, processor in processors.items():
            if processor.code_type is not code_type:
                raise ValueError(
                    f"{processor_name(processor.code_type)} registered under {code_type}"
                )
        self._processors = MappingProxyType(dict(processors))

    @property
    def types(self) -> tuple[CodeType, ...]:
        return tuple(self._processors)

    def find_by_type(self, code_type: CodeType) -> "ValidateCodeProcessor":
        processor = self._processors.get(code_type)
        if processor is None:
            raise ProcessorNotFound(processor_name(code_type))
        return processor

    def find_by_name(self, name: str) -> "ValidateCodeProcessor":
        try:
            code_type = CodeType.resolve(name)
        except UnknownCodeType:
            raise ProcessorNotFound(f"{(name or '').lower()}Processor") from None
        return self.find_by_type(code_type)
