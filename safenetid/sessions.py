"""
Server-side sessions.

The cookie carries only an opaque random token; the session data lives in a
SessionStore owned by the application's session interface. The memory store
is process-held, so sessions do not survive a restart.
"""

import logging
import secrets
import threading
import time

from flask import session
from flask.sessions import SessionInterface, SessionMixin
from flask_login import login_user, logout_user
from werkzeug.datastructures import CallbackDict

logger = logging.getLogger(__name__)


class SessionStore:
    """Session data keyed by token."""

    def get(self, token):
        raise NotImplementedError

    def set(self, token, data, lifetime=None):
        raise NotImplementedError

    def destroy(self, token):
        raise NotImplementedError


class MemorySessionStore(SessionStore):
    """Thread-safe in-process store with per-entry expiry."""

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._entries = {}
        self._lock = threading.Lock()

    def get(self, token):
        with self._lock:
            entry = self._entries.get(token)
            if entry is None:
                return None
            data, expires_at = entry
            if expires_at is not None and expires_at <= self._clock():
                del self._entries[token]
                return None
            return dict(data)

    def set(self, token, data, lifetime=None):
        expires_at = None
        if lifetime is not None:
            expires_at = self._clock() + lifetime.total_seconds()
        with self._lock:
            self._sweep()
            self._entries[token] = (dict(data), expires_at)

    def destroy(self, token):
        with self._lock:
            self._entries.pop(token, None)

    def _sweep(self):
        # caller holds the lock
        now = self._clock()
        expired = [token for token, (_, expires_at) in self._entries.items()
                   if expires_at is not None and expires_at <= now]
        for token in expired:
            del self._entries[token]

    def __len__(self):
        with self._lock:
            return len(self._entries)


SESSION_STORES = {
    'memory': MemorySessionStore,
}


def create_session_store(name):
    try:
        return SESSION_STORES[name]()
    except KeyError:
        raise ValueError(f'Unknown SESSION_STORE "{name}"; '
                         f'expected one of {sorted(SESSION_STORES)}') from None


class ServerSideSession(CallbackDict, SessionMixin):

    def __init__(self, initial=None, token=None, new=False):
        def on_update(self):
            self.modified = True

        super().__init__(initial, on_update)
        self.token = token
        self.new = new
        self.modified = False
        self.stale_tokens = []

    def regenerate(self):
        """Drop the current token; a fresh one is issued when the response is saved."""
        if self.token:
            self.stale_tokens.append(self.token)
        self.token = None
        self.modified = True


class ServerSideSessionInterface(SessionInterface):

    def __init__(self, store):
        self.store = store

    def open_session(self, app, request):
        token = request.cookies.get(self.get_cookie_name(app))
        if token:
            data = self.store.get(token)
            if data is not None:
                return ServerSideSession(data, token=token)
        return ServerSideSession(new=True)

    def save_session(self, app, session, response):
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)

        for token in session.stale_tokens:
            self.store.destroy(token)

        if not session:
            if session.token:
                self.store.destroy(session.token)
            if session.modified:
                response.delete_cookie(name, domain=domain, path=path)
            return

        issue_cookie = session.token is None
        if issue_cookie:
            session.token = secrets.token_urlsafe(32)

        # Storing on every request makes the lifetime sliding.
        self.store.set(session.token, dict(session), app.permanent_session_lifetime)

        if issue_cookie or self.should_set_cookie(app, session):
            response.set_cookie(
                name,
                session.token,
                expires=self.get_expiration_time(app, session),
                httponly=self.get_cookie_httponly(app),
                domain=domain,
                path=path,
                secure=self.get_cookie_secure(app),
                samesite=self.get_cookie_samesite(app),
            )


def begin_login(identity):
    """Bind `identity` (a User or Admin) to a fresh session."""
    session.clear()
    session.regenerate()
    login_user(identity)
    logger.info('%s session started for %r', identity.role.value, identity)


def end_login():
    """Destroy the current session. Safe to call when anonymous."""
    logout_user()
    session.clear()
