from unittest.mock import patch

from app.core.config import settings
from app.core.security import AdminSessionStore, SettingsCredentialVerifier


def test_settings_credentials():
    verifier = SettingsCredentialVerifier()

    assert verifier.verify(settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD) is True
    assert verifier.verify(settings.ADMIN_USERNAME, "wrong") is False
    assert verifier.verify("", "") is False


def test_session_lifecycle():
    sessions = AdminSessionStore(ttl_seconds=60)

    token = sessions.create()

    assert sessions.validate(token) is True
    assert sessions.validate("made-up") is False
    assert sessions.validate(None) is False
    assert sessions.revoke(token) is True
    assert sessions.validate(token) is False


def test_session_expires():
    sessions = AdminSessionStore(ttl_seconds=60)

    with patch("app.core.security.time.time", return_value=1000.0):
        token = sessions.create()

    with patch("app.core.security.time.time", return_value=1059.0):
        assert sessions.validate(token) is True

    with patch("app.core.security.time.time", return_value=1060.0):
        assert sessions.validate(token) is False


def test_create_purges_expired_sessions():
    sessions = AdminSessionStore(ttl_seconds=60)

    with patch("app.core.security.time.time", return_value=1000.0):
        old_token = sessions.create()

    with patch("app.core.security.time.time", return_value=2000.0):
        new_token = sessions.create()

    assert old_token not in sessions._sessions
    assert new_token in sessions._sessions
