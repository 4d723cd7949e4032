"""Domain package exports for value objects, errors, and ports."""

from .errors import ErrorKind, ReductError
from .ports import ApiRequest, ApiResponse, HttpTransport, TokenPort, UseCaseError
from .server import ServerSettings
from .token_models import AccessToken, FullTokenInfo, TokenInfo, TokenPermissions
from .urls import ServerURL, TokenURL

__all__ = [
    "AccessToken",
    "ApiRequest",
    "ApiResponse",
    "ErrorKind",
    "FullTokenInfo",
    "HttpTransport",
    "ReductError",
    "ServerSettings",
    "ServerURL",
    "TokenInfo",
    "TokenPermissions",
    "TokenPort",
    "TokenURL",
    "UseCaseError",
]
