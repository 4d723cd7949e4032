"""Typed domain objects for access-token management."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, FrozenSet, Iterable, Optional


def _bucket_set(buckets: Optional[Iterable[str]], label: str) -> FrozenSet[str]:
    if buckets is None:
        return frozenset()
    if isinstance(buckets, str):
        raise ValueError(f"{label} must be a collection of bucket names, not a string.")
    names = frozenset(buckets)
    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"{label} entries must be non-empty strings.")
    return names


def _require_aware(value: datetime, label: str) -> None:
    if not isinstance(value, datetime):
        raise TypeError(f"{label} requires a datetime instance.")
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        raise ValueError(f"{label} must be timezone-aware.")


@dataclass(frozen=True)
class TokenPermissions:
    """Bucket-level permissions granted to a token."""

    full_access: bool
    """Manage buckets and tokens in addition to reading and writing data."""

    read_access: FrozenSet[str] = frozenset()
    """Buckets the token may read from."""

    write_access: FrozenSet[str] = frozenset()
    """Buckets the token may write to."""

    def __post_init__(self) -> None:
        if not isinstance(self.full_access, bool):
            raise ValueError("TokenPermissions.full_access must be a bool.")
        object.__setattr__(self, "read_access", _bucket_set(self.read_access, "read_access"))
        object.__setattr__(self, "write_access", _bucket_set(self.write_access, "write_access"))

    @classmethod
    def of(
        cls,
        full_access: bool,
        read_access: Optional[Iterable[str]] = None,
        write_access: Optional[Iterable[str]] = None,
    ) -> "TokenPermissions":
        """Build permissions from any iterables of bucket names."""
        return cls(
            full_access=full_access,
            read_access=read_access,  # type: ignore[arg-type]
            write_access=write_access,  # type: ignore[arg-type]
        )

    def to_payload(self) -> Dict[str, Any]:
        """Render the create-token request body; bucket lists are sorted."""
        return {
            "full_access": self.full_access,
            "read_access": sorted(self.read_access),
            "write_access": sorted(self.write_access),
        }


@dataclass(frozen=True)
class AccessToken:
    """Token value issued by the server on creation."""

    value: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("AccessToken.value must be a non-empty string.")
        _require_aware(self.created_at, "AccessToken.created_at")

    def __repr__(self) -> str:
        # Keep secrets out of logs and tracebacks.
        return f"AccessToken(value='***', created_at={self.created_at.isoformat()!r})"


@dataclass(frozen=True)
class TokenInfo:
    """Token summary as returned by the token listing."""

    name: str
    created_at: datetime
    is_provisioned: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("TokenInfo.name must be a non-empty string.")
        _require_aware(self.created_at, "TokenInfo.created_at")


@dataclass(frozen=True)
class FullTokenInfo(TokenInfo):
    """Token summary together with its permissions."""

    permissions: TokenPermissions = TokenPermissions(full_access=False)


__all__ = ["AccessToken", "FullTokenInfo", "TokenInfo", "TokenPermissions"]
