"""
Admin sessions.

A session is created when an admin signs in with a storefront bearer token
and removed on logout or expiry. It carries the token forwarded on every
storefront call, plus that admin's category store and tree expansion state.
"""

import logging
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from ziva_admin.categories.store import CategoryStore
from ziva_admin.categories.tree_view import ExpansionState

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AdminSession:
    session_id: str
    token: str
    expires_at: datetime
    store: CategoryStore = field(default_factory=CategoryStore)
    expansion: ExpansionState = field(default_factory=ExpansionState)
    product_count: int | None = None
    created_at: datetime = field(default_factory=_utcnow)

    @property
    def is_expired(self) -> bool:
        return _utcnow() >= self.expires_at


class SessionRegistry:
    """In-process table of live admin sessions keyed by session id."""

    def __init__(self):
        self._sessions: dict[str, AdminSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(
        self,
        token: str,
        ttl: timedelta,
        store: CategoryStore | None = None,
    ) -> AdminSession:
        session = AdminSession(
            session_id=secrets.token_urlsafe(24),
            token=token,
            expires_at=_utcnow() + ttl,
            store=store or CategoryStore(),
        )
        self._sessions[session.session_id] = session
        logger.info(f"Admin session {session.session_id[:8]} started")
        return session

    def get(self, session_id: str) -> AdminSession | None:
        session = self._sessions.get(session_id)
        if session is None:
            return None
        if session.is_expired:
            self.end(session_id)
            return None
        return session

    def end(self, session_id: str) -> bool:
        session = self._sessions.pop(session_id, None)
        if session is not None:
            logger.info(f"Admin session {session_id[:8]} ended")
        return session is not None

    def clear(self) -> None:
        self._sessions.clear()


sessions = SessionRegistry()
