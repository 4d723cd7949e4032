"""Use case for creating a token, optionally replacing an existing one."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from reduct_admin.domain.errors import ErrorKind, ReductError
from reduct_admin.domain.ports import TokenPort, UseCaseError
from reduct_admin.domain.token_models import AccessToken, TokenPermissions
from reduct_admin.usecases.error_mapping import map_reduct_error

_log = logging.getLogger(__name__)


@dataclass
class ProvisionToken:
    """Create a named token through ``TokenPort``.

    With ``replace_existing`` a name clash removes the old token and creates
    the new one once more; any other failure is reported as is.
    """

    token_port: TokenPort

    def __call__(
        self,
        *,
        name: str,
        full_access: bool = False,
        read_buckets: Optional[Iterable[str]] = None,
        write_buckets: Optional[Iterable[str]] = None,
        replace_existing: bool = False,
    ) -> AccessToken:
        normalized_name = str(name or "").strip()
        if not normalized_name:
            raise UseCaseError("TOKEN_NO_NAME", "Token name is required.")
        try:
            permissions = TokenPermissions.of(full_access, read_buckets, write_buckets)
        except ValueError as exc:
            raise UseCaseError("TOKEN_INVALID_PERMISSIONS", str(exc)) from exc

        try:
            return self.token_port.create_token(normalized_name, permissions)
        except ReductError as exc:
            if not (replace_existing and exc.kind is ErrorKind.CONFLICT):
                raise map_reduct_error(
                    exc,
                    default_code="TOKEN_CREATE_FAILED",
                    default_message="Token creation failed.",
                ) from exc
            _log.info("Token '%s' exists; replacing it.", normalized_name)

        try:
            self.token_port.remove_token(normalized_name)
            return self.token_port.create_token(normalized_name, permissions)
        except ReductError as exc:
            raise map_reduct_error(
                exc,
                default_code="TOKEN_REPLACE_FAILED",
                default_message="Token replacement failed.",
            ) from exc


__all__ = ["ProvisionToken"]
