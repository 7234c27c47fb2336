import secrets
import time
from typing import Dict, Optional

from fastapi import Header

from app.core.config import settings
from app.core.errors import AuthenticationError


class CredentialVerifier:
    """Checks an admin username/password pair. Swap in a real credential store by subclassing."""

    def verify(self, username: str, password: str) -> bool:
        raise NotImplementedError


class SettingsCredentialVerifier(CredentialVerifier):
    """Single admin account configured through ADMIN_USERNAME / ADMIN_PASSWORD."""

    def verify(self, username: str, password: str) -> bool:
        if not username or not password:
            return False
        username_ok = secrets.compare_digest(username.encode(), settings.ADMIN_USERNAME.encode())
        password_ok = secrets.compare_digest(password.encode(), settings.ADMIN_PASSWORD.encode())
        return username_ok and password_ok


class AdminSessionStore:
    """In-process admin tokens. Tokens die with the process or after the TTL."""

    def __init__(self, ttl_seconds: int = None):
        self.ttl_seconds = ttl_seconds or settings.ADMIN_SESSION_TTL_SECONDS
        self._sessions: Dict[str, float] = {}

    def create(self) -> str:
        now = time.time()
        self.purge_expired(now)
        token = secrets.token_urlsafe(32)
        self._sessions[token] = now + self.ttl_seconds
        return token

    def purge_expired(self, now: float = None) -> int:
        now = now if now is not None else time.time()
        expired = [token for token, expires_at in self._sessions.items() if now >= expires_at]
        for token in expired:
            del self._sessions[token]
        return len(expired)

    def validate(self, token: Optional[str]) -> bool:
        if not token:
            return False
        expires_at = self._sessions.get(token)
        if expires_at is None:
            return False
        if time.time() >= expires_at:
            self._sessions.pop(token, None)
            return False
        return True

    def revoke(self, token: str) -> bool:
        return self._sessions.pop(token, None) is not None


credential_verifier = SettingsCredentialVerifier()
admin_sessions = AdminSessionStore()


def _extract_token(x_admin_token: Optional[str], authorization: Optional[str]) -> Optional[str]:
    if x_admin_token:
        return x_admin_token
    if authorization and authorization.lower().startswith("bearer "):
        return authorization[7:].strip()
    return None


async def require_admin(
    x_admin_token: str = Header(None),
    authorization: str = Header(None),
) -> str:
    """
    Verify the admin session token sent as `X-Admin-Token` or `Authorization: Bearer`.
    Returns the token so handlers (logout) can act on it.
    """
    token = _extract_token(x_admin_token, authorization)
    if not admin_sessions.validate(token):
        raise AuthenticationError()
    return token
