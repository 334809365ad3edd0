from podroutes.config import DEFAULT_BASE_URL, DEFAULT_MAX_CONCURRENCY, DEFAULT_ORIGIN, Settings


def _clear(monkeypatch):
    for k in [
        "PODROUTES_BASE_URL",
        "NEXT_PUBLIC_BASE_URL",
        "PODROUTES_ORIGIN",
        "PODROUTES_MAX_CONCURRENCY",
        "PODROUTES_FETCH_TIMEOUT",
        "PODROUTES_LOG_LEVEL",
    ]:
        monkeypatch.delenv(k, raising=False)


def test_settings_defaults(monkeypatch):
    _clear(monkeypatch)
    s = Settings.from_env()
    assert s.base_url == DEFAULT_BASE_URL
    assert s.origin == DEFAULT_ORIGIN
    assert s.max_concurrency == DEFAULT_MAX_CONCURRENCY
    assert s.feed_url == "http://localhost:8000/api/feed"
    assert s.log_level == "INFO"


def test_settings_from_env(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("NEXT_PUBLIC_BASE_URL", "https://feeds.example.com/")
    monkeypatch.setenv("PODROUTES_MAX_CONCURRENCY", "3")
    monkeypatch.setenv("PODROUTES_FETCH_TIMEOUT", "2.5")
    monkeypatch.setenv("PODROUTES_LOG_LEVEL", "debug")
    s = Settings.from_env()
    assert s.feed_url == "https://feeds.example.com/api/feed"
    assert s.max_concurrency == 3
    assert s.fetch_timeout == 2.5
    assert s.log_level == "DEBUG"

    monkeypatch.setenv("PODROUTES_BASE_URL", "https://podroutes.example.org")
    assert Settings.from_env().base_url == "https://podroutes.example.org"


def test_settings_invalid_numbers_fall_back(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("PODROUTES_MAX_CONCURRENCY", "lots")
    monkeypatch.setenv("PODROUTES_FETCH_TIMEOUT", "-1")
    s = Settings.from_env()
    assert s.max_concurrency == DEFAULT_MAX_CONCURRENCY
    assert s.fetch_timeout == 10.0
