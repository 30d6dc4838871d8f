
from app.config import Settings

def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    s = Settings(_env_file=None)
    assert s.PORT == 3000
    assert s.HOST == "0.0.0.0"

def test_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings(_env_file=None).PORT == 8080
