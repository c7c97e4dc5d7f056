"""
Session Store

In-memory mapping from session tokens to session records. A single
instance is shared by every request thread; all operations hold one lock.
Expired records are treated as absent on lookup but are never purged.
"""

import logging
import threading
import time
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional, Tuple

from portal.models import SessionRecord

logger = logging.getLogger(__name__)

DEFAULT_LIFETIME = timedelta(hours=1)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionStore:
    """Token -> SessionRecord map guarded by a single mutex."""

    def __init__(self, lifetime: timedelta = DEFAULT_LIFETIME,
                 clock: Callable[[], datetime] = utcnow):
        self.lifetime = lifetime
        self.clock = clock
        self._sessions: Dict[str, SessionRecord] = {}
        self._lock = threading.Lock()
        self._last_token = 0

    def init_app(self, app):
        """Bind the store to a Flask app, taking the lifetime from its config."""
        self.lifetime = app.config.get('SESSION_LIFETIME', DEFAULT_LIFETIME)
        app.extensions['session_store'] = self

    def _next_token(self) -> str:
        # Time-derived and predictable; bumped by one when the clock has not
        # moved so tokens stay strictly increasing. Caller holds the lock.
        value = time.time_ns()
        if value <= self._last_token:
            value = self._last_token + 1
        self._last_token = value
        return str(value)

    def create(self, username: str) -> str:
        """Create a session for ``username`` and return its token."""
        with self._lock:
            token = self._next_token()
            self._sessions[token] = SessionRecord(
                username=username,
                expiry=self.clock() + self.lifetime,
            )
        logger.info('Created session for %s', username)
        return token

    def get(self, token: str) -> Tuple[Optional[SessionRecord], bool]:
        """Return ``(record, True)`` for a live session, ``(None, False)`` otherwise.

        An expired record stays in the store; it is only reported as absent.
        """
        with self._lock:
            record = self._sessions.get(token)
            if record is None or record.expiry <= self.clock():
                logger.debug('No live session for presented token')
                return None, False
            return record, True

    def invalidate(self, token: str) -> None:
        """Remove the session for ``token`` if there is one."""
        with self._lock:
            removed = self._sessions.pop(token, None)
        if removed is not None:
            logger.info('Invalidated session for %s', removed.username)

    def __len__(self):
        with self._lock:
            return len(self._sessions)

    def __contains__(self, token):
        with self._lock:
            return token in self._sessions
