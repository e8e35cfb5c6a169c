from datetime import datetime, timedelta, timezone

import pytest

from vcode.domain.entities import ImageCode, RequestContext, ValidateCode
from vcode.domain.errors import ParameterReadError

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


def test_expiring_in_sets_absolute_expiry():
    code = ValidateCode.expiring_in("1234", 60, now=T0)
    assert code.expire_time == T0 + timedelta(seconds=60)


def test_is_expired_at_and_after_expire_time():
    code = ValidateCode(code="1234", expire_time=T0)
    assert not code.is_expired(T0 - timedelta(microseconds=1))
    assert code.is_expired(T0)
    assert code.is_expired(T0 + timedelta(seconds=1))


def test_is_expired_defaults_to_now():
    assert ValidateCode.expiring_in("1", -1).is_expired()
    assert not ValidateCode.expiring_in("1", 60).is_expired()


def test_image_code_bare_drops_image():
    code = ImageCode.expiring_in("AB7K", 60, now=T0, image=b"\x89PNG")
    assert code.image == b"\x89PNG"
    bare = code.bare()
    assert type(bare) is ValidateCode
    assert bare == ValidateCode(code="AB7K", expire_time=T0 + timedelta(seconds=60))


@pytest.mark.parametrize(
    "params, expected",
    [
        ({}, None),
        ({"smsCode": "1234"}, "1234"),
        ({"smsCode": ["1234", "9999"]}, "1234"),
        ({"smsCode": ("5678",)}, "5678"),
        ({"smsCode": []}, None),
    ],
)
def test_get_param(params, expected):
    assert RequestContext(session_id="s", params=params).get_param("smsCode") == expected


@pytest.mark.parametrize("bad", [123, b"1234", [object()], {"a": 1}])
def test_get_param_malformed(bad):
    ctx = RequestContext(session_id="s", params={"smsCode": bad})
    with pytest.raises(ParameterReadError, match="smsCode"):
        ctx.get_param("smsCode")


def test_get_int_param():
    ctx = RequestContext(session_id="s", params={"width": "120", "height": " "})
    assert ctx.get_int_param("width", 67) == 120
    assert ctx.get_int_param("height", 23) == 23
    assert ctx.get_int_param("missing", 5) == 5

    with pytest.raises(ParameterReadError, match="not an integer"):
        RequestContext(session_id="s", params={"width": "wide"}).get_int_param(
            "width", 67
        )


def test_default_response_slot_is_per_context():
    a = RequestContext(session_id="a")
    b = RequestContext(session_id="b")
    a.response.headers["X"] = "1"
    assert b.response.headers == {}
