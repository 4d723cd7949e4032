from __future__ import annotations

import pytest

from reduct_admin.domain.server import ServerSettings


def test_base_url_uses_http_without_tls() -> None:
    settings = ServerSettings(False, "localhost", 8383)
    assert settings.base_url == "http://localhost:8383"


def test_base_url_uses_https_with_tls() -> None:
    settings = ServerSettings(use_tls=True, host="reduct.example.com", port=443)
    assert settings.base_url == "https://reduct.example.com:443"
    assert str(settings) == settings.base_url


@pytest.mark.parametrize("host", ["", "   ", None])
def test_blank_host_is_rejected(host) -> None:
    with pytest.raises(ValueError):
        ServerSettings(False, host, 8383)


@pytest.mark.parametrize("port", [0, 65536, -1, "8383", True])
def test_invalid_port_is_rejected(port) -> None:
    with pytest.raises(ValueError):
        ServerSettings(False, "localhost", port)


def test_settings_are_immutable() -> None:
    settings = ServerSettings(False, "localhost", 8383)
    with pytest.raises(AttributeError):
        settings.port = 9000  # type: ignore[misc]


@pytest.mark.parametrize(
    "host, expected",
    [
        ("::1", "http://[::1]:8383"),
        ("[::1]", "http://[::1]:8383"),
        ("127.0.0.1", "http://127.0.0.1:8383"),
    ],
)
def test_base_url_brackets_ipv6_hosts(host: str, expected: str) -> None:
    assert ServerSettings(False, host, 8383).base_url == expected
