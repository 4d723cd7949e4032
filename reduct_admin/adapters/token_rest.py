"""REST adapter implementing ``TokenPort``.

This adapter builds token API requests, sends each one once through an
injected ``HttpTransport`` and interprets the answer into domain results or
``ReductError``.

Dependencies:
    - ``token_requests`` for request construction and argument checks.
    - ``token_responses`` for status classification and body decoding.

Call context:
    - Created by ``reduct_admin.utils.settings.build_token_client`` or directly
      with a custom transport.
    - Invoked by use cases in ``reduct_admin/usecases``.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, TypeVar
from urllib.parse import urlsplit

from reduct_admin.adapters.api_errors import TransportError
from reduct_admin.adapters.token_requests import (
    build_create_token_request,
    build_current_token_request,
    build_get_token_request,
    build_list_tokens_request,
    build_remove_token_request,
)
from reduct_admin.adapters.token_responses import (
    CREATE_TOKEN_RULES,
    CURRENT_TOKEN_RULES,
    GET_TOKEN_RULES,
    LIST_TOKENS_RULES,
    REMOVE_TOKEN_RULES,
    StatusRules,
    ignore_body,
    interpret,
    parse_access_token,
    parse_full_token_info,
    parse_token_list,
    transport_failure,
)
from reduct_admin.domain.errors import ReductError
from reduct_admin.domain.ports import ApiRequest, ApiResponse, HttpTransport, TokenPort
from reduct_admin.domain.server import ServerSettings
from reduct_admin.domain.token_models import (
    AccessToken,
    FullTokenInfo,
    TokenInfo,
    TokenPermissions,
)

T = TypeVar("T")


class ReductTokenClient(TokenPort):
    """Token lifecycle client for the ReductStore admin API."""

    def __init__(
        self,
        settings: Optional[ServerSettings],
        transport: Optional[HttpTransport],
        access_token: str,
    ) -> None:
        """Create a client bound to one server and one credential.

        Args:
            settings: Server address; required.
            transport: Object satisfying ``HttpTransport``; required.
            access_token: Opaque bearer token sent with every request.

        Raises:
            ValueError: If ``settings`` or ``transport`` is missing.
        """
        if settings is None:
            raise ValueError("ReductTokenClient requires server settings")
        if transport is None:
            raise ValueError("ReductTokenClient requires a transport")
        self.settings = settings
        self.transport = transport
        self._access_token = access_token
        self._log = logging.getLogger(__name__)

    def create_token(
        self, name: Optional[str], permissions: Optional[TokenPermissions]
    ) -> AccessToken:
        """Create token ``name`` with ``permissions`` and return its value.

        Raises:
            ValueError: If ``name`` is empty or ``permissions`` is missing.
            ReductError: For transport failures and non-200 responses.
        """
        request = build_create_token_request(
            self.settings, self._access_token, name, permissions
        )
        token = self._call(request, CREATE_TOKEN_RULES, parse_access_token)
        self._log.info("Created token '%s'.", name)
        return token

    def list_tokens(self) -> List[TokenInfo]:
        """Return all tokens known to the server."""
        request = build_list_tokens_request(self.settings, self._access_token)
        return self._call(request, LIST_TOKENS_RULES, parse_token_list)

    def get_token(self, name: Optional[str]) -> FullTokenInfo:
        """Return token ``name`` with its permissions."""
        request = build_get_token_request(self.settings, self._access_token, name)
        return self._call(request, GET_TOKEN_RULES, parse_full_token_info)

    def remove_token(self, name: Optional[str]) -> None:
        """Remove token ``name``; provisioned tokens cannot be removed."""
        request = build_remove_token_request(self.settings, self._access_token, name)
        self._call(request, REMOVE_TOKEN_RULES, ignore_body)
        self._log.info("Removed token '%s'.", name)

    def get_current_token(self) -> FullTokenInfo:
        """Return the token this client authenticates with."""
        request = build_current_token_request(self.settings, self._access_token)
        return self._call(request, CURRENT_TOKEN_RULES, parse_full_token_info)

    # ------------------------------------------------------------------
    def _call(
        self, request: ApiRequest, rules: StatusRules, parse: Callable[[str], T]
    ) -> T:
        """Send ``request`` once and interpret the outcome."""
        ctx = f"{request.method} {urlsplit(request.url).path}"
        self._log.debug("Sending %s", ctx)
        try:
            response: ApiResponse = self.transport.send(request)
        except (TransportError, OSError) as exc:
            err = transport_failure(exc)
            self._log.warning("%s failed: %s (%s)", ctx, err.message, exc)
            raise err from exc
        try:
            return interpret(response, rules, parse)
        except ReductError as err:
            self._log.warning("%s failed: %s (HTTP %s)", ctx, err.message, err.status_code)
            raise


__all__ = ["ReductTokenClient"]
