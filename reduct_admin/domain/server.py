"""Connection settings for a ReductStore server."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ServerSettings:
    """Immutable address of the server the admin client talks to."""

    use_tls: bool
    host: str
    port: int

    def __post_init__(self) -> None:
        if not isinstance(self.host, str) or not self.host.strip():
            raise ValueError("ServerSettings.host must be a non-empty string.")
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ValueError("ServerSettings.port must be an integer.")
        if not 1 <= self.port <= 65535:
            raise ValueError(f"Invalid server port: {self.port}. Must be between 1 and 65535")

    @property
    def scheme(self) -> str:
        return "https" if self.use_tls else "http"

    @property
    def base_url(self) -> str:
        """Return ``scheme://host:port`` without a trailing slash."""
        host = self.host.strip()
        # IPv6 literals must be bracketed in URLs.
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return f"{self.scheme}://{host}:{self.port}"

    def __str__(self) -> str:
        return self.base_url


__all__ = ["ServerSettings"]
