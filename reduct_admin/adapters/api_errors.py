"""Transport-level failures raised by ``HttpTransport`` implementations."""

from __future__ import annotations

from typing import Optional


class TransportError(RuntimeError):
    """Base class for failures that prevented a response from arriving."""

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message)
        self.context = context


class TransportIOError(TransportError):
    """Connection, timeout, or other I/O failure while sending a request."""


class TransportInterruptedError(TransportError):
    """Waiting for the response was interrupted or cancelled."""


__all__ = ["TransportError", "TransportIOError", "TransportInterruptedError"]
