"""Use case for removing several tokens in one go."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from reduct_admin.domain.errors import ReductError
from reduct_admin.domain.ports import TokenPort, UseCaseError
from reduct_admin.usecases.error_mapping import map_reduct_error


@dataclass
class RevokeTokensResult:
    """Removed token names and per-name failure messages."""

    removed: List[str] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)


@dataclass
class RevokeTokens:
    """Use-case callable removing each named token, continuing past failures."""

    token_port: TokenPort

    def __call__(self, *, names: Iterable[str]) -> RevokeTokensResult:
        targets: List[str] = []
        for name in names:
            normalized = str(name or "").strip()
            if normalized and normalized not in targets:
                targets.append(normalized)
        if not targets:
            raise UseCaseError("TOKEN_NO_TARGETS", "No tokens selected for removal.")

        result = RevokeTokensResult()
        for name in targets:
            try:
                self.token_port.remove_token(name)
            except ReductError as exc:
                mapped = map_reduct_error(
                    exc,
                    default_code="TOKEN_REMOVE_FAILED",
                    default_message="Token removal failed.",
                )
                result.failures[name] = mapped.message
                continue
            result.removed.append(name)
        return result


__all__ = ["RevokeTokens", "RevokeTokensResult"]
