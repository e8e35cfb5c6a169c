from contextlib import asynccontextmanager

from fastapi import FastAPI

from vcode.application.bootstrap import build_default_processors
from vcode.domain.ports.session_store import SessionStorePort
from vcode.domain.ports.sms_gateway import SmsGatewayPort
from vcode.infrastructure.http.client import (
    close_http_client,
    get_http_client,
    open_http_client,
)
from vcode.infrastructure.redis_cache.pool import close_redis, get_redis
from vcode.infrastructure.session.memory import InMemorySessionStore
from vcode.infrastructure.session.redis_store import RedisSessionStore
from vcode.infrastructure.sms.http_gateway import HttpSmsGateway
from vcode.infrastructure.sms.log_gateway import LogSmsGateway
from vcode.logging import setup_logging
from vcode.presentation.api import api
from vcode.settings import Settings, get_settings


def build_session_store(settings: Settings) -> SessionStorePort:
    if settings.session_backend == "redis":
        return RedisSessionStore(get_redis(), ttl_seconds=settings.session_ttl_seconds)
    return InMemorySessionStore(ttl_seconds=settings.session_ttl_seconds)


def build_sms_gateway(settings: Settings) -> SmsGatewayPort:
    if settings.sms_gateway == "http":
        return HttpSmsGateway(
            settings.sms_gateway_url,
            client=get_http_client(),
            auth_token=settings.sms_gateway_token,
        )
    return LogSmsGateway()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # startup
    await open_http_client()
    sessions = build_session_store(settings)
    sms_gateway = build_sms_gateway(settings)

    # Registry is built once and read-only afterwards
    app.state.processors = build_default_processors(
        settings, sessions=sessions, sms_gateway=sms_gateway
    )

    try:
        yield
    finally:
        # shutdown
        if isinstance(sms_gateway, HttpSmsGateway):
            await sms_gateway.aclose()  # it won't close the shared client
        await close_http_client()
        if settings.session_backend == "redis":
            await close_redis()


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(title="Verification Code API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.include_router(api)
    return app


app = create_app()
