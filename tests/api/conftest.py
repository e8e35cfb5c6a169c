import pytest
from fastapi.testclient import TestClient

from vcode.application.bootstrap import build_default_processors
from vcode.infrastructure.session.memory import InMemorySessionStore
from vcode.main import create_app
from vcode.presentation.dependencies import get_processors
from vcode.settings import Settings
from tests.fakes import FakeSmsGateway

COOKIE = "VCODE_SESSION"


@pytest.fixture()
def app_and_deps():
    app = create_app()
    sessions = InMemorySessionStore()
    gateway = FakeSmsGateway()
    processors = build_default_processors(
        Settings(_env_file=None), sessions=sessions, sms_gateway=gateway
    )

    app.dependency_overrides[get_processors] = lambda: processors

    try:
        yield app, sessions, gateway
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app_and_deps):
    app, _, _ = app_and_deps
    return TestClient(app, raise_server_exceptions=False)


def stored_code(sessions: InMemorySessionStore, session_id: str, key: str) -> str | None:
    attrs = sessions._sessions.get(session_id, {})  # type: ignore[attr-defined]
    code = attrs.get(key)
    return code.code if code else None
