from __future__ import annotations

from typing import Callable

from vcode.application.processor import ValidateCodeProcessor
from vcode.application.registry import GeneratorRegistry, ProcessorRegistry
from vcode.domain.code_type import CodeType
from vcode.domain.entities import utcnow
from vcode.domain.ports.code_generator import CodeGeneratorPort
from vcode.domain.ports.code_sender import CodeSenderPort
from vcode.domain.ports.session_store import SessionStorePort
from vcode.domain.ports.sms_gateway import SmsGatewayPort
from vcode.infrastructure.generators.image import ImageCodeGenerator
from vcode.infrastructure.generators.sms import SmsCodeGenerator
from vcode.infrastructure.senders.image import ImageCodeSender
from vcode.infrastructure.senders.sms import SmsCodeSender
from vcode.settings import Settings


def build_processors(
    *,
    generators: dict[CodeType, CodeGeneratorPort],
    senders: dict[CodeType, CodeSenderPort],
    sessions: SessionStorePort,
    session_key_prefix: str,
    clock: Callable = utcnow,
) -> ProcessorRegistry:
    """
    Wire one processor per CodeType that has a sender.
    Generators are looked up lazily, so a type without one fails at create().
    """
    generator_registry = GeneratorRegistry(generators)
    processors = {
        code_type: ValidateCodeProcessor(
            code_type,
            generators=generator_registry,
            sender=sender,
            sessions=sessions,
            session_key_prefix=session_key_prefix,
            clock=clock,
        )
        for code_type, sender in senders.items()
    }
    return ProcessorRegistry(processors)


def build_default_processors(
    settings: Settings,
    *,
    sessions: SessionStorePort,
    sms_gateway: SmsGatewayPort,
) -> ProcessorRegistry:
    generators: dict[CodeType, CodeGeneratorPort] = {
        CodeType.SMS: SmsCodeGenerator(
            length=settings.sms_code_length,
            ttl_seconds=settings.sms_code_ttl_seconds,
        ),
        CodeType.IMAGE: ImageCodeGenerator(
            length=settings.image_code_length,
            ttl_seconds=settings.image_code_ttl_seconds,
            width=settings.image_width,
            height=settings.image_height,
            max_width=settings.image_max_width,
            max_height=settings.image_max_height,
        ),
    }
    senders: dict[CodeType, CodeSenderPort] = {
        CodeType.SMS: SmsCodeSender(sms_gateway),
        CodeType.IMAGE: ImageCodeSender(),
    }
    return build_processors(
        generators=generators,
        senders=senders,
        sessions=sessions,
        session_key_prefix=settings.session_key_prefix,
    )
