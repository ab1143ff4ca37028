"""Tests for bootstrap wiring and the runtime entrypoint."""

import pytest
from fastapi.testclient import TestClient

from bluegreen import bootstrap as bootstrap_module
from bluegreen import main as main_module
from bluegreen.bootstrap import bootstrap_create_application, bootstrap_create_server
from bluegreen.config import AppSettings, SettingsLoadError
from bluegreen.domain import RELEASE_GREEN


def test_bootstrap_create_application_serves_configured_release() -> None:
    """Serve the release selected by settings.

    Returns:
        None: Assertions validate wiring.

    Raises:
        AssertionError: Raised when the wrong release is served.
    """

    client = TestClient(bootstrap_create_application(AppSettings(release_name="v2")))

    response = client.get("/health")

    assert response.json()["environment"] == "green"


def test_bootstrap_create_server_binds_configured_port() -> None:
    """Build a server for the configured port and release."""

    server = bootstrap_create_server(AppSettings(port=9090, release_name="v2"))

    assert server.config.port == 9090
    assert server.release_profile is RELEASE_GREEN


def test_bootstrap_create_server_resolves_release_once(monkeypatch: pytest.MonkeyPatch) -> None:
    """Resolve the release profile once and share it with the application and server.

    Returns:
        None: Assertions validate single resolution.

    Raises:
        AssertionError: Raised when the profile is resolved more than once.
    """

    resolved_names = []

    def _recording_resolver(release_name: str):
        resolved_names.append(release_name)
        return RELEASE_GREEN

    monkeypatch.setattr(bootstrap_module, "domain_get_release_profile", _recording_resolver)

    server = bootstrap_create_server(AppSettings(release_name="v2"))

    assert resolved_names == ["v2"]
    assert server.release_profile is RELEASE_GREEN
    assert TestClient(server.config.app).get("/health").json()["environment"] == "green"


def test_main_runs_selected_release(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Resolve the positional release argument and run the built server.

    Returns:
        None: Assertions validate entrypoint wiring.

    Raises:
        AssertionError: Raised when the wrong server is run.
    """

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.delenv("RELEASE_NAME", raising=False)
    started_servers = []
    monkeypatch.setattr(main_module, "config_configure_logging", lambda log_level: None)
    monkeypatch.setattr(main_module, "server_run", started_servers.append)

    main_module.main(["v2"])

    assert len(started_servers) == 1
    assert started_servers[0].config.port == 9090
    assert started_servers[0].release_profile is RELEASE_GREEN


def test_main_fails_fast_on_invalid_port(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Raise SettingsLoadError before serving when PORT is malformed."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PORT", "eighty")
    monkeypatch.setattr(main_module, "config_configure_logging", lambda log_level: None)
    monkeypatch.setattr(main_module, "server_run", lambda server: None)

    with pytest.raises(SettingsLoadError):
        main_module.main([])
