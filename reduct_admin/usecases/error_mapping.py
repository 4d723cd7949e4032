"""Translate token client errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from reduct_admin.domain.errors import ReductError
from reduct_admin.domain.ports import UseCaseError


def map_reduct_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map client exceptions to stable UseCaseError codes.

    ``ReductError`` keeps its fixed message and status code; the code becomes
    ``TOKEN_<KIND>``. Anything else falls back to ``default_code``.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ReductError):
        return UseCaseError(
            f"TOKEN_{exc.kind.name}",
            exc.message,
            status_code=exc.status_code,
        )

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


__all__ = ["map_reduct_error"]
