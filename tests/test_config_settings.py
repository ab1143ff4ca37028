"""Tests for runtime settings loading and validation."""

import pytest

from bluegreen.config import AppSettings, SettingsLoadError, config_load_settings


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Clear settings variables and hide any local dotenv file."""

    for variable in ("PORT", "HOST", "RELEASE_NAME", "LOG_LEVEL", "GRACEFUL_SHUTDOWN_SECONDS"):
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.chdir(tmp_path)


def test_config_load_settings_defaults_to_port_8080() -> None:
    """Bind to port 8080 and the blue release when nothing is configured.

    Returns:
        None: Assertions validate defaults.

    Raises:
        AssertionError: Raised when defaults differ.
    """

    settings = config_load_settings()

    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.release_name == "v1"
    assert settings.log_level == "INFO"
    assert settings.graceful_shutdown_seconds == 10.0


def test_config_load_settings_reads_port_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use the `PORT` environment variable when set.

    Returns:
        None: Assertions validate environment mapping.

    Raises:
        AssertionError: Raised when the port is not applied.
    """

    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("RELEASE_NAME", " V2 ")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = config_load_settings()

    assert settings.port == 9090
    assert settings.release_name == "v2"
    assert settings.log_level == "DEBUG"


def test_config_load_settings_overrides_take_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prefer explicit overrides over environment values."""

    monkeypatch.setenv("RELEASE_NAME", "v1")

    assert config_load_settings(release_name="v2").release_name == "v2"


@pytest.mark.parametrize(
    ("variable", "value"),
    [
        ("PORT", "not-a-port"),
        ("PORT", "70000"),
        ("RELEASE_NAME", "v3"),
        ("LOG_LEVEL", "loud"),
        ("GRACEFUL_SHUTDOWN_SECONDS", "0"),
    ],
)
def test_config_load_settings_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch, variable: str, value: str) -> None:
    """Fail fast with SettingsLoadError on malformed configuration.

    Returns:
        None: Assertions validate startup failure.

    Raises:
        AssertionError: Raised when invalid values are accepted.
    """

    monkeypatch.setenv(variable, value)

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_app_settings_is_constructible_directly() -> None:
    """Accept explicit keyword arguments like any pydantic settings model."""

    settings = AppSettings(port=9191, release_name="v2")

    assert settings.port == 9191
    assert settings.release_name == "v2"
