"""Server-side path templates, relative to the server base URL."""

from __future__ import annotations

from enum import Enum
from urllib.parse import quote


class _PathTemplate(str, Enum):
    @property
    def url(self) -> str:
        return self.value

    def format_path(self, *segments: str) -> str:
        """Substitute path segments positionally, percent-encoding each one."""
        return self.value.format(*(quote(str(segment), safe="") for segment in segments))


class TokenURL(_PathTemplate):
    CREATE_TOKEN = "api/v1/tokens/{}"
    # Same resource, different HTTP method.
    GET_TOKEN = CREATE_TOKEN
    REMOVE_TOKEN = CREATE_TOKEN
    LIST_TOKENS = "api/v1/tokens"
    CURRENT_TOKEN = "api/v1/me"


class ServerURL(_PathTemplate):
    SERVER_INFO = "api/v1/info"


__all__ = ["ServerURL", "TokenURL"]
