import uvicorn

from favfilms.common import settings as s
from favfilms.services.api import main as entry


def test_serverless_does_not_bind(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *a, **kw: calls.append((a, kw)))
    monkeypatch.setenv("VERCEL", "1")
    s.get_settings.cache_clear()
    try:
        entry.main()
    finally:
        s.get_settings.cache_clear()
    assert calls == []


def test_long_lived_binds_configured_port(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *a, **kw: calls.append((a, kw)))
    monkeypatch.delenv("VERCEL", raising=False)
    monkeypatch.delenv("SERVERLESS", raising=False)
    monkeypatch.setenv("API__PORT", "5055")
    s.get_settings.cache_clear()
    try:
        entry.main()
    finally:
        s.get_settings.cache_clear()
    (args, kw), = calls
    assert args == ("favfilms.services.api.app:app",)
    assert kw["port"] == 5055
