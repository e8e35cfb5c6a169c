from vcode.settings import get_settings


def test_get_settings_is_cached():
    get_settings.cache_clear()
    s1 = get_settings()
    s2 = get_settings()
    assert s1 is s2  # lru_cache returns the same instance


def test_env_overrides_and_cache_clear(monkeypatch):
    monkeypatch.setenv("SMS_CODE_TTL_SECONDS", "123")
    monkeypatch.setenv("SESSION_BACKEND", "redis")
    get_settings.cache_clear()
    s = get_settings()
    assert s.sms_code_ttl_seconds == 123
    assert s.session_backend == "redis"

    monkeypatch.delenv("SMS_CODE_TTL_SECONDS", raising=False)
    monkeypatch.delenv("SESSION_BACKEND", raising=False)
    get_settings.cache_clear()
    s2 = get_settings()
    assert s2.sms_code_ttl_seconds != 123


def test_defaults():
    get_settings.cache_clear()
    s = get_settings()
    assert s.session_key_prefix == "SESSION_KEY_FOR_CODE_"
    assert s.sms_gateway in ("log", "http")
