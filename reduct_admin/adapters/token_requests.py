"""Request construction for token API operations.

Every builder is a pure function of the server settings, the bearer token and
the operation arguments. Argument checks run here, before anything reaches a
transport, and fail with ``ValueError``.
"""

from __future__ import annotations

import json
from typing import Dict, Optional

from reduct_admin.domain.ports import ApiRequest
from reduct_admin.domain.server import ServerSettings
from reduct_admin.domain.token_models import TokenPermissions
from reduct_admin.domain.urls import TokenURL


def _headers(access_token: str, *, json_body: bool = False) -> Dict[str, str]:
    headers = {
        "Accept": "application/json",
        "Authorization": f"Bearer {access_token}",
    }
    if json_body:
        headers["Content-Type"] = "application/json"
    return headers


def _make_url(settings: ServerSettings, path: str) -> str:
    return f"{settings.base_url}/{path}"


def _require_name(name: Optional[str]) -> str:
    if name is None:
        raise ValueError("Token name is required.")
    if not isinstance(name, str):
        raise ValueError("Token name must be a string.")
    if not name:
        raise ValueError("Token name must not be empty.")
    return name


def build_create_token_request(
    settings: ServerSettings,
    access_token: str,
    name: Optional[str],
    permissions: Optional[TokenPermissions],
) -> ApiRequest:
    """Build ``POST api/v1/tokens/{name}`` with the permissions as JSON body."""
    token_name = _require_name(name)
    if permissions is None:
        raise ValueError("Token permissions are required.")
    if not isinstance(permissions, TokenPermissions):
        raise ValueError("permissions must be a TokenPermissions instance.")
    return ApiRequest(
        method="POST",
        url=_make_url(settings, TokenURL.CREATE_TOKEN.format_path(token_name)),
        headers=_headers(access_token, json_body=True),
        body=json.dumps(permissions.to_payload()),
    )


def build_list_tokens_request(settings: ServerSettings, access_token: str) -> ApiRequest:
    return ApiRequest(
        method="GET",
        url=_make_url(settings, TokenURL.LIST_TOKENS.format_path()),
        headers=_headers(access_token),
    )


def build_get_token_request(
    settings: ServerSettings, access_token: str, name: Optional[str]
) -> ApiRequest:
    token_name = _require_name(name)
    return ApiRequest(
        method="GET",
        url=_make_url(settings, TokenURL.GET_TOKEN.format_path(token_name)),
        headers=_headers(access_token),
    )


def build_remove_token_request(
    settings: ServerSettings, access_token: str, name: Optional[str]
) -> ApiRequest:
    token_name = _require_name(name)
    return ApiRequest(
        method="DELETE",
        url=_make_url(settings, TokenURL.REMOVE_TOKEN.format_path(token_name)),
        headers=_headers(access_token),
    )


def build_current_token_request(settings: ServerSettings, access_token: str) -> ApiRequest:
    return ApiRequest(
        method="GET",
        url=_make_url(settings, TokenURL.CURRENT_TOKEN.format_path()),
        headers=_headers(access_token),
    )


__all__ = [
    "build_create_token_request",
    "build_current_token_request",
    "build_get_token_request",
    "build_list_tokens_request",
    "build_remove_token_request",
]
