# tests/integration/conftest.py
import os

import pytest
import pytest_asyncio
from redis.asyncio import Redis

REDIS_URL = os.environ.get("REDIS_URL")


@pytest_asyncio.fixture
async def redis_client():
    if not REDIS_URL:
        pytest.skip("REDIS_URL not set")
    r = Redis.from_url(REDIS_URL, encoding="utf-8", decode_responses=True)
    try:
        yield r
    finally:
        await r.aclose()
