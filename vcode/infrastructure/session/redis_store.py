from __future__ import annotations

import json
from datetime import datetime
from typing import Optional

from redis.asyncio import Redis

from vcode.domain.entities import RequestContext, ValidateCode
from vcode.domain.ports.session_store import SessionStorePort


def dump_code(code: ValidateCode) -> str:
    return json.dumps({"code": code.code, "expire_time": code.expire_time.isoformat()})


def load_code(raw: str) -> ValidateCode:
    data = json.loads(raw)
    return ValidateCode(
        code=data["code"], expire_time=datetime.fromisoformat(data["expire_time"])
    )


class RedisSessionStore(SessionStorePort):
    """
    One hash per session: field = attribute key, value = JSON code.
    The hash TTL is the session lifetime, refreshed on every write;
    code expiry is checked by the caller.
    """

    def __init__(
        self, redis: Redis, *, key_prefix: str = "vsess:", ttl_seconds: int = 1800
    ) -> None:
        self._redis = redis
        self._prefix = key_prefix
        self._ttl = ttl_seconds

    def _key(self, session_id: str) -> str:
        return f"{self._prefix}{session_id}"

    async def set_attribute(
        self, context: RequestContext, key: str, value: ValidateCode
    ) -> None:
        hkey = self._key(context.session_id)
        pipe = self._redis.pipeline(transaction=True)
        pipe.hset(hkey, key, dump_code(value))
        pipe.expire(hkey, self._ttl)
        await pipe.execute()

    async def get_attribute(
        self, context: RequestContext, key: str
    ) -> Optional[ValidateCode]:
        raw = await self._redis.hget(self._key(context.session_id), key)
        if raw is None:
            return None
        return load_code(raw)

    async def remove_attribute(self, context: RequestContext, key: str) -> None:
        await self._redis.hdel(self._key(context.session_id), key)
