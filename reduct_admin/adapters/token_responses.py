"""Interpretation of token API responses.

The outcome of one call is either a transport failure or a status code with a
body. ``classify_status`` is the single total mapping from a status code to
success or an ``(ErrorKind, message)`` pair; every code outside an operation's
table falls into ``UNEXPECTED_STATUS``. Only a 200 body is ever decoded, and a
200 whose body does not match the expected shape is ``INVALID_RESPONSE``,
never a result with missing fields.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, TypeVar

from reduct_admin.adapters.api_errors import TransportError, TransportInterruptedError
from reduct_admin.domain.errors import (
    INVALID_TOKEN_MESSAGE,
    MALFORMED_RESPONSE_MESSAGE,
    MISSING_PERMISSIONS_MESSAGE,
    PROVISIONED_TOKEN_MESSAGE,
    TOKEN_EXISTS_MESSAGE,
    TOKEN_NOT_FOUND_MESSAGE,
    TRANSPORT_INTERRUPTED_MESSAGE,
    TRANSPORT_IO_MESSAGE,
    UNEXPECTED_RESPONSE_MESSAGE,
    UNKNOWN_BUCKET_MESSAGE,
    ErrorKind,
    ReductError,
)
from reduct_admin.domain.ports import ApiResponse
from reduct_admin.domain.token_models import (
    AccessToken,
    FullTokenInfo,
    TokenInfo,
    TokenPermissions,
)

T = TypeVar("T")

HTTP_OK = 200

StatusRules = Mapping[int, Tuple[ErrorKind, str]]

_AUTH_RULES: Dict[int, Tuple[ErrorKind, str]] = {
    401: (ErrorKind.UNAUTHORIZED, INVALID_TOKEN_MESSAGE),
    403: (ErrorKind.FORBIDDEN, MISSING_PERMISSIONS_MESSAGE),
}

CREATE_TOKEN_RULES: StatusRules = {
    **_AUTH_RULES,
    409: (ErrorKind.CONFLICT, TOKEN_EXISTS_MESSAGE),
    422: (ErrorKind.UNPROCESSABLE_ENTITY, UNKNOWN_BUCKET_MESSAGE),
}
LIST_TOKENS_RULES: StatusRules = dict(_AUTH_RULES)
CURRENT_TOKEN_RULES: StatusRules = dict(_AUTH_RULES)
GET_TOKEN_RULES: StatusRules = {
    **_AUTH_RULES,
    404: (ErrorKind.NOT_FOUND, TOKEN_NOT_FOUND_MESSAGE),
}
REMOVE_TOKEN_RULES: StatusRules = {
    **GET_TOKEN_RULES,
    409: (ErrorKind.CONFLICT, PROVISIONED_TOKEN_MESSAGE),
}


class MalformedBodyError(ValueError):
    """Raised by body parsers when a 200 payload has the wrong shape."""


def classify_status(status: int, rules: StatusRules) -> Optional[Tuple[ErrorKind, str]]:
    """Return ``None`` for success, else the failure kind and its fixed message."""
    if status == HTTP_OK:
        return None
    rule = rules.get(status)
    if rule is not None:
        return rule
    return ErrorKind.UNEXPECTED_STATUS, UNEXPECTED_RESPONSE_MESSAGE


def transport_failure(exc: BaseException) -> ReductError:
    """Classify an exception raised by ``HttpTransport.send``.

    ``InterruptedError`` is an ``OSError``; it is checked first so plain
    transports that let it escape still map to the interrupted category.
    """
    if isinstance(exc, (TransportInterruptedError, InterruptedError)):
        return ReductError(TRANSPORT_INTERRUPTED_MESSAGE, kind=ErrorKind.TRANSPORT_INTERRUPTED)
    if isinstance(exc, (TransportError, OSError)):
        return ReductError(TRANSPORT_IO_MESSAGE, kind=ErrorKind.TRANSPORT_IO)
    raise TypeError(f"Not a transport failure: {type(exc).__name__}")


def interpret(response: ApiResponse, rules: StatusRules, parse: Callable[[str], T]) -> T:
    """Map one response to a parsed result or raise ``ReductError``."""
    failure = classify_status(response.status_code, rules)
    if failure is not None:
        kind, message = failure
        raise ReductError(message, kind=kind, status_code=response.status_code)
    try:
        return parse(response.body)
    except MalformedBodyError as exc:
        raise ReductError(
            MALFORMED_RESPONSE_MESSAGE,
            kind=ErrorKind.INVALID_RESPONSE,
            status_code=response.status_code,
        ) from exc


# ------------------------------------------------------------------
# Body parsers
def _json_any(body: str) -> Any:
    try:
        return json.loads(body)
    except (TypeError, ValueError, RecursionError) as exc:
        raise MalformedBodyError(f"Invalid JSON response: {str(body)[:400]}") from exc


def _json_dict(body: str) -> Dict[str, Any]:
    payload = _json_any(body)
    if not isinstance(payload, dict):
        raise MalformedBodyError("Invalid JSON response shape: expected object")
    return payload


def _require_str(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value:
        raise MalformedBodyError(f"Invalid token payload: {key} missing")
    return value


def _parse_timestamp(payload: Mapping[str, Any], key: str) -> datetime:
    text = _require_str(payload, key)
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        value = datetime.fromisoformat(text)
    except ValueError as exc:
        raise MalformedBodyError(f"Invalid token payload: {key} is not ISO-8601") from exc
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _bucket_list(permissions: Mapping[str, Any], *keys: str) -> List[str]:
    for key in keys:
        if key not in permissions:
            continue
        value = permissions[key]
        if value is None:
            return []
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise MalformedBodyError(f"Invalid permissions payload: {key} must be a list of names")
        return list(value)
    return []


def _parse_permissions(raw: Any) -> TokenPermissions:
    if not isinstance(raw, Mapping):
        raise MalformedBodyError("Invalid token payload: permissions missing")
    full_access = raw.get("full_access", False)
    if not isinstance(full_access, bool):
        raise MalformedBodyError("Invalid permissions payload: full_access must be a bool")
    try:
        return TokenPermissions.of(
            full_access,
            _bucket_list(raw, "read", "read_access"),
            _bucket_list(raw, "write", "write_access"),
        )
    except ValueError as exc:
        raise MalformedBodyError(f"Invalid permissions payload: {exc}") from exc


def _parse_token_info(raw: Any) -> TokenInfo:
    if not isinstance(raw, Mapping):
        raise MalformedBodyError("Invalid token list payload: entry is invalid")
    provisioned = raw.get("is_provisioned", False)
    if not isinstance(provisioned, bool):
        raise MalformedBodyError("Invalid token payload: is_provisioned must be a bool")
    return TokenInfo(
        name=_require_str(raw, "name"),
        created_at=_parse_timestamp(raw, "created_at"),
        is_provisioned=provisioned,
    )


def parse_access_token(body: str) -> AccessToken:
    """Decode a create-token response: ``{"value": ..., "created_at": ...}``."""
    payload = _json_dict(body)
    return AccessToken(
        value=_require_str(payload, "value"),
        created_at=_parse_timestamp(payload, "created_at"),
    )


def parse_token_list(body: str) -> List[TokenInfo]:
    payload = _json_dict(body)
    raw_tokens = payload.get("tokens")
    if not isinstance(raw_tokens, list):
        raise MalformedBodyError("Invalid token list payload: tokens missing")
    return [_parse_token_info(raw) for raw in raw_tokens]


def parse_full_token_info(body: str) -> FullTokenInfo:
    payload = _json_dict(body)
    info = _parse_token_info(payload)
    return FullTokenInfo(
        name=info.name,
        created_at=info.created_at,
        is_provisioned=info.is_provisioned,
        permissions=_parse_permissions(payload.get("permissions")),
    )


def ignore_body(body: str) -> None:
    """Parser for operations whose success carries no payload."""
    return None


__all__ = [
    "CREATE_TOKEN_RULES",
    "CURRENT_TOKEN_RULES",
    "GET_TOKEN_RULES",
    "LIST_TOKENS_RULES",
    "MalformedBodyError",
    "REMOVE_TOKEN_RULES",
    "StatusRules",
    "classify_status",
    "ignore_body",
    "interpret",
    "parse_access_token",
    "parse_full_token_info",
    "parse_token_list",
    "transport_failure",
]
