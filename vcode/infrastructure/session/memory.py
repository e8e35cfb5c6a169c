from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, Dict, Optional

from vcode.domain.entities import RequestContext, ValidateCode, utcnow
from vcode.domain.ports.session_store import SessionStorePort


class InMemorySessionStore(SessionStorePort):
    """
    Process-local sessions. Lost on restart, not shared across workers.

    Each session lives `ttl_seconds` after its last write, like the Redis
    hash TTL. Stale sessions are dropped lazily on access and on write.
    """

    def __init__(
        self, *, ttl_seconds: int = 1800, clock: Callable[[], datetime] = utcnow
    ) -> None:
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock
        self._sessions: Dict[str, Dict[str, ValidateCode]] = {}
        self._deadlines: Dict[str, datetime] = {}

    def _drop(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)
        self._deadlines.pop(session_id, None)

    def _purge_stale(self, now: datetime) -> None:
        for session_id in [s for s, d in self._deadlines.items() if now >= d]:
            self._drop(session_id)

    def _live(self, session_id: str) -> Optional[Dict[str, ValidateCode]]:
        deadline = self._deadlines.get(session_id)
        if deadline is not None and self._clock() >= deadline:
            self._drop(session_id)
            return None
        return self._sessions.get(session_id)

    async def set_attribute(
        self, context: RequestContext, key: str, value: ValidateCode
    ) -> None:
        now = self._clock()
        self._purge_stale(now)
        self._sessions.setdefault(context.session_id, {})[key] = value
        self._deadlines[context.session_id] = now + self._ttl

    async def get_attribute(
        self, context: RequestContext, key: str
    ) -> Optional[ValidateCode]:
        attrs = self._live(context.session_id)
        if attrs is None:
            return None
        return attrs.get(key)

    async def remove_attribute(self, context: RequestContext, key: str) -> None:
        attrs = self._live(context.session_id)
        if attrs is None:
            return
        attrs.pop(key, None)
        if not attrs:
            self._drop(context.session_id)

    def __len__(self) -> int:
        return len(self._sessions)
