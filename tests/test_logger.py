"""日志脱敏与登录失败日志测试。"""
import tempfile
from pathlib import Path

import structlog
from structlog.testing import capture_logs

from sample_app.auth import store as store_module
from sample_app.auth.models import Registration
from sample_app.auth.store import UserStore
from sample_app.logger import _censor_secrets


def test_censor_secrets() -> None:
    event = {
        "event": "user_registered",
        "password": "secret123",
        "password_confirmation": "secret123",
        "salt": "abc",
        "encrypted_password": "def",
        "user_id": "u1",
    }
    out = _censor_secrets(None, "info", event)
    for key in ("password", "password_confirmation", "salt", "encrypted_password"):
        assert out[key] == "***REDACTED***"
    assert out["user_id"] == "u1"
    assert out["event"] == "user_registered"


def test_authentication_failed_has_no_email_or_reason(monkeypatch) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = UserStore(base_dir=Path(tmp))
        with capture_logs() as logs:
            monkeypatch.setattr(store_module, "logger", structlog.get_logger(store_module.__name__))
            store.register(Registration(
                name="Alice",
                email="alice@example.com",
                password="secret123",
                password_confirmation="secret123",
            ))
            store.authenticate("alice@example.com", "wrong-password")
            store.authenticate("missing@x.com", "wrong-password")

        failures = [e for e in logs if e["event"] == "authentication_failed"]
        assert len(failures) == 2
        assert failures[0] == failures[1]
        for entry in logs:
            assert "email" not in entry
            assert "password" not in entry
