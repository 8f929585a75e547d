"""Settings tests: CORS allow-list parsing and HTTPS requirement."""

from app.config.settings import DEFAULT_CORS_ORIGINS, AppSettings


def test_default_cors_origins():
    settings = AppSettings(_env_file=None)
    assert settings.cors_allowed_origins == DEFAULT_CORS_ORIGINS
    assert settings.cors_origins == [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:5174",
        "http://127.0.0.1:5174",
    ]


def test_cors_origins_trimmed_and_empty_dropped():
    settings = AppSettings(_env_file=None, cors_allowed_origins=" https://vote.example.org , ,https://admin.example.org,")
    assert settings.cors_origins == ["https://vote.example.org", "https://admin.example.org"]


def test_cors_origins_from_environment(monkeypatch):
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://vote.example.org")
    assert AppSettings(_env_file=None).cors_origins == ["https://vote.example.org"]


def test_https_required_in_prod_or_forced():
    assert AppSettings(_env_file=None, environment="prod").https_required is True
    assert AppSettings(_env_file=None, environment="dev", force_https=True).https_required is True
    assert AppSettings(_env_file=None, environment="dev").https_required is False
