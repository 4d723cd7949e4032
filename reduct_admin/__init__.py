"""Access-token administration client for ReductStore."""

from reduct_admin.adapters.api_errors import (
    TransportError,
    TransportInterruptedError,
    TransportIOError,
)
from reduct_admin.adapters.http_client import HttpConfig, RequestsTransport
from reduct_admin.adapters.token_rest import ReductTokenClient
from reduct_admin.domain import (
    AccessToken,
    ApiRequest,
    ApiResponse,
    ErrorKind,
    FullTokenInfo,
    ReductError,
    ServerSettings,
    TokenInfo,
    TokenPermissions,
)
from reduct_admin.utils.settings import ClientSettings, build_token_client, load_client_settings

__all__ = [
    "AccessToken",
    "ApiRequest",
    "ApiResponse",
    "ClientSettings",
    "ErrorKind",
    "FullTokenInfo",
    "HttpConfig",
    "ReductError",
    "ReductTokenClient",
    "RequestsTransport",
    "ServerSettings",
    "TokenInfo",
    "TokenPermissions",
    "TransportError",
    "TransportIOError",
    "TransportInterruptedError",
    "build_token_client",
    "load_client_settings",
]
