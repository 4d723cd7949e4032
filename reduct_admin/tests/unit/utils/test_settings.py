from __future__ import annotations

import pytest

from reduct_admin.adapters.http_client import RequestsTransport
from reduct_admin.adapters.token_rest import ReductTokenClient
from reduct_admin.utils.settings import ClientSettings, build_token_client, load_client_settings


def test_defaults_without_environment() -> None:
    settings = load_client_settings({})

    assert settings.server.base_url == "http://localhost:8383"
    assert settings.api_token == ""
    assert settings.timeout_s == 10.0


def test_environment_overrides() -> None:
    settings = load_client_settings(
        {
            "REDUCT_HOST": "db.internal",
            "REDUCT_PORT": "443",
            "REDUCT_USE_TLS": "yes",
            "REDUCT_API_TOKEN": "secret",
            "REDUCT_TIMEOUT_S": "2.5",
        }
    )

    assert settings.server.base_url == "https://db.internal:443"
    assert settings.api_token == "secret"
    assert settings.timeout_s == 2.5
    assert "secret" not in repr(settings)


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REDUCT_HOST", "from-env")
    monkeypatch.delenv("REDUCT_PORT", raising=False)

    assert load_client_settings().server.host == "from-env"


@pytest.mark.parametrize(
    "env",
    [
        {"REDUCT_PORT": "abc"},
        {"REDUCT_PORT": "70000"},
        {"REDUCT_TIMEOUT_S": "soon"},
        {"REDUCT_TIMEOUT_S": "0"},
    ],
)
def test_invalid_values_raise(env) -> None:
    with pytest.raises(ValueError):
        load_client_settings(env)


def test_build_token_client_wires_requests_transport() -> None:
    settings = ClientSettings(server=load_client_settings({}).server, api_token="t", timeout_s=4.0)

    client = build_token_client(settings)

    assert isinstance(client, ReductTokenClient)
    assert isinstance(client.transport, RequestsTransport)
    assert client.transport.cfg.request_timeout_s == 4.0
    assert client.settings.base_url == "http://localhost:8383"
