"""Settings — defaults and upstream URL normalization."""

from employee_api.config import Settings


def test_trailing_slash_stripped_from_upstream_url():
    settings = Settings(upstream_base_url="http://localhost:8112/")
    assert settings.upstream_base_url == "http://localhost:8112"


def test_top_earners_count_defaults_to_ten(monkeypatch):
    monkeypatch.delenv("TOP_EARNERS_COUNT", raising=False)
    assert Settings().top_earners_count == 10


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("TOP_EARNERS_COUNT", "3")
    monkeypatch.setenv("UPSTREAM_TIMEOUT_SECONDS", "2.5")
    settings = Settings()
    assert settings.top_earners_count == 3
    assert settings.upstream_timeout_seconds == 2.5
