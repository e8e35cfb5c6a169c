import pytest

from vcode.application.bootstrap import build_processors
from vcode.domain.code_type import CodeType
from vcode.domain.entities import RequestContext
from vcode.infrastructure.session.memory import InMemorySessionStore
from tests.fakes import FakeClock, FakeGenerator, FakeSender


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def sessions():
    return InMemorySessionStore()


@pytest.fixture()
def sender():
    return FakeSender()


@pytest.fixture()
def generators(clock):
    return {
        CodeType.SMS: FakeGenerator("4821", clock=clock, ttl_seconds=300),
        CodeType.IMAGE: FakeGenerator("AB7K", clock=clock, ttl_seconds=60),
    }


@pytest.fixture()
def processors(generators, sender, sessions, clock):
    return build_processors(
        generators=generators,
        senders={CodeType.SMS: sender, CodeType.IMAGE: sender},
        sessions=sessions,
        session_key_prefix="SESSION_KEY_FOR_CODE_",
        clock=clock,
    )


@pytest.fixture()
def ctx():
    """Factory for request contexts bound to session 's1' by default."""

    def _make(session_id: str = "s1", **params) -> RequestContext:
        return RequestContext(session_id=session_id, params=params)

    return _make
