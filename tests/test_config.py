from pathlib import Path

import pytest

from lookangles.config import Settings

_ENV_VARS = (
    "LOOKANGLES_STATE_PATH",
    "LOOKANGLES_LOG_LEVEL",
    "NOMINATIM_URL",
    "NOMINATIM_USER_AGENT",
    "GEOCODE_TIMEOUT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.from_env()
    assert settings.state_path == Path.home() / ".lookangles" / "state.json"
    assert settings.log_level == "INFO"
    assert settings.nominatim_url == "https://nominatim.openstreetmap.org/search"
    assert settings.nominatim_user_agent == "LookAngles/1.0"
    assert settings.geocode_timeout == 10.0


def test_overrides(clean_env, tmp_path):
    clean_env.setenv("LOOKANGLES_STATE_PATH", str(tmp_path / "s.json"))
    clean_env.setenv("LOOKANGLES_LOG_LEVEL", "debug")
    clean_env.setenv("NOMINATIM_URL", "http://localhost:8080/search")
    clean_env.setenv("NOMINATIM_USER_AGENT", "Field/2")
    clean_env.setenv("GEOCODE_TIMEOUT", "2.5")

    settings = Settings.from_env()

    assert settings.state_path == tmp_path / "s.json"
    assert settings.log_level == "DEBUG"
    assert settings.nominatim_url == "http://localhost:8080/search"
    assert settings.nominatim_user_agent == "Field/2"
    assert settings.geocode_timeout == 2.5


def test_invalid_timeout_raises(clean_env):
    clean_env.setenv("GEOCODE_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        Settings.from_env()
