import pytest

from mangaloom.config import ApiSettings, get_settings
from mangaloom.constants import DEFAULT_TIMEOUT, MANGADEX_API_BASE_URL


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("BASE_URL", "REQUEST_TIMEOUT", "USERNAME"):
        monkeypatch.delenv(f"MANGALOOM_{name}", raising=False)
    settings = ApiSettings(_env_file=None)

    assert settings.base_url == MANGADEX_API_BASE_URL
    assert settings.request_timeout == DEFAULT_TIMEOUT
    assert settings.username is None
    assert settings.pre_request_hooks == []


def test_environment_variables_use_prefix(monkeypatch):
    monkeypatch.setenv("MANGALOOM_BASE_URL", "https://sandbox.mangadex.test")
    monkeypatch.setenv("MANGALOOM_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("MANGALOOM_USERNAME", "reader")
    monkeypatch.setenv("BASE_URL", "https://ignored.test")

    settings = ApiSettings(_env_file=None)

    assert settings.base_url == "https://sandbox.mangadex.test"
    assert settings.request_timeout == 2.5
    assert settings.username == "reader"


def test_env_file_is_read(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("MANGALOOM_USER_AGENT=reader-bot/1.0\nUNRELATED=1\n")

    settings = ApiSettings(_env_file=env_file)

    assert settings.user_agent == "reader-bot/1.0"


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("MANGALOOM_LOG_LEVEL", "DEBUG")

    first = get_settings()
    monkeypatch.setenv("MANGALOOM_LOG_LEVEL", "ERROR")

    assert get_settings() is first
    assert first.log_level == "DEBUG"
