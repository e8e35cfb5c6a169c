import pytest

from vcode.application.bootstrap import build_default_processors
from vcode.domain.code_type import CodeType
from vcode.domain.entities import RequestContext
from vcode.infrastructure.session.memory import InMemorySessionStore
from vcode.settings import Settings
from tests.fakes import FakeSmsGateway


@pytest.fixture()
def wired():
    settings = Settings(
        sms_code_length=4,
        image_code_length=5,
        session_key_prefix="PFX_",
        _env_file=None,
    )
    sessions = InMemorySessionStore()
    gateway = FakeSmsGateway()
    return (
        build_default_processors(settings, sessions=sessions, sms_gateway=gateway),
        sessions,
        gateway,
    )


def test_every_code_type_has_a_processor(wired):
    registry, _, _ = wired
    assert set(registry.types) == set(CodeType)
    for code_type in CodeType:
        assert registry.find_by_type(code_type).code_type is code_type


@pytest.mark.asyncio
async def test_sms_end_to_end(wired):
    registry, sessions, gateway = wired
    processor = registry.find_by_name("sms")

    await processor.create(RequestContext(session_id="s1", params={"mobile": "138"}))
    sent = gateway.calls[0]["code"]
    assert len(sent) == 4
    assert (await sessions.get_attribute(RequestContext("s1"), "PFX_SMS")).code == sent

    await processor.validate(RequestContext(session_id="s1", params={"smsCode": sent}))
    assert await sessions.get_attribute(RequestContext("s1"), "PFX_SMS") is None


@pytest.mark.asyncio
async def test_image_end_to_end(wired):
    registry, sessions, _ = wired
    processor = registry.find_by_name("IMAGE")
    ctx = RequestContext(session_id="s1")

    await processor.create(ctx)
    assert ctx.response.media_type == "image/png"
    stored = await sessions.get_attribute(ctx, "PFX_IMAGE")
    assert len(stored.code) == 5
    assert not hasattr(stored, "image")

    await processor.validate(
        RequestContext(session_id="s1", params={"imageCode": stored.code})
    )
