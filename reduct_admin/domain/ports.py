from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol

from reduct_admin.domain.token_models import (
    AccessToken,
    FullTokenInfo,
    TokenInfo,
    TokenPermissions,
)


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code


# ---- Wire values ----
@dataclass(frozen=True)
class ApiRequest:
    """Outbound HTTP request, fully formed and transport-agnostic."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None


@dataclass(frozen=True)
class ApiResponse:
    """Status code and decoded body text returned by a transport."""

    status_code: int
    body: str = ""


# ---- Ports (Hexagonal boundaries) ----
class HttpTransport(Protocol):
    """Send one request and return its response.

    Implementations raise ``TransportIOError`` when the request could not be
    completed and ``TransportInterruptedError`` when waiting was interrupted.
    """

    def send(self, request: ApiRequest) -> ApiResponse: ...


class TokenPort(Protocol):
    """Token lifecycle operations against the server admin API."""

    def create_token(self, name: str, permissions: TokenPermissions) -> AccessToken: ...
    def list_tokens(self) -> List[TokenInfo]: ...
    def get_token(self, name: str) -> FullTokenInfo: ...
    def remove_token(self, name: str) -> None: ...
    def get_current_token(self) -> FullTokenInfo: ...
