"""Environment-driven client settings and client composition.

Environment variables:
    REDUCT_HOST: server host name (default ``localhost``).
    REDUCT_PORT: server port (default ``8383``).
    REDUCT_USE_TLS: truthy to use ``https``.
    REDUCT_API_TOKEN: bearer token sent with every request.
    REDUCT_TIMEOUT_S: per-request timeout in seconds (default ``10``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from reduct_admin.adapters.http_client import HttpConfig, RequestsTransport
from reduct_admin.adapters.token_rest import ReductTokenClient
from reduct_admin.domain.server import ServerSettings
from reduct_admin.utils.logging import env_truthy

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8383
DEFAULT_TIMEOUT_S = 10.0


@dataclass(frozen=True)
class ClientSettings:
    """Everything needed to build a token client."""

    server: ServerSettings
    api_token: str = ""
    timeout_s: float = DEFAULT_TIMEOUT_S

    def __repr__(self) -> str:
        return (
            f"ClientSettings(server={self.server.base_url!r}, api_token='***', "
            f"timeout_s={self.timeout_s!r})"
        )


def _int_value(raw: Optional[str], name: str, default: int) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _float_value(raw: Optional[str], name: str, default: float) -> float:
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def load_client_settings(env: Optional[Mapping[str, str]] = None) -> ClientSettings:
    """Read client settings from ``env`` (defaults to ``os.environ``).

    Raises:
        ValueError: If the port or timeout is not a valid number.
    """
    source = os.environ if env is None else env
    host = (source.get("REDUCT_HOST") or DEFAULT_HOST).strip()
    server = ServerSettings(
        use_tls=env_truthy(source.get("REDUCT_USE_TLS")),
        host=host,
        port=_int_value(source.get("REDUCT_PORT"), "REDUCT_PORT", DEFAULT_PORT),
    )
    return ClientSettings(
        server=server,
        api_token=source.get("REDUCT_API_TOKEN", ""),
        timeout_s=_float_value(source.get("REDUCT_TIMEOUT_S"), "REDUCT_TIMEOUT_S", DEFAULT_TIMEOUT_S),
    )


def build_token_client(settings: Optional[ClientSettings] = None) -> ReductTokenClient:
    """Wire a ``ReductTokenClient`` over a ``RequestsTransport``."""
    cfg = settings or load_client_settings()
    transport = RequestsTransport(HttpConfig(request_timeout_s=cfg.timeout_s))
    return ReductTokenClient(cfg.server, transport, cfg.api_token)


__all__ = ["ClientSettings", "build_token_client", "load_client_settings"]
