from services.config import DEFAULT_API_URL, DEFAULT_TIMEOUT, get_settings


def test_defaults(monkeypatch):
    for var in ("SCHOOLS_API_URL", "SCHOOLS_API_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    settings = get_settings()
    assert settings.api_base_url == DEFAULT_API_URL
    assert settings.request_timeout == DEFAULT_TIMEOUT
    assert settings.log_level == "INFO"


def test_single_base_url_from_environment(monkeypatch):
    monkeypatch.setenv("SCHOOLS_API_URL", "https://schools.example.com/")
    monkeypatch.setenv("SCHOOLS_API_TIMEOUT", "7.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.api_base_url == "https://schools.example.com"
    assert settings.request_timeout == 7.5
    assert settings.log_level == "DEBUG"


def test_invalid_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("SCHOOLS_API_TIMEOUT", "soon")
    assert get_settings().request_timeout == DEFAULT_TIMEOUT
    monkeypatch.setenv("SCHOOLS_API_TIMEOUT", "-1")
    assert get_settings().request_timeout == DEFAULT_TIMEOUT
