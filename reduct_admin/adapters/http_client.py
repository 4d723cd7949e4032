"""Shared HTTP transport for the token REST adapter.

This module provides a thin wrapper around ``requests.Session`` that satisfies
``HttpTransport``: it sends an ``ApiRequest`` once and returns the status code
and body text, translating ``requests`` failures into typed transport errors.

Dependencies:
    - ``requests`` for network I/O.
    - ``reduct_admin.adapters.api_errors`` for typed transport failures.

Call context:
    - Constructed by ``reduct_admin.utils.settings.build_token_client``.
    - Used only through the ``HttpTransport`` port; status-code interpretation
      lives in ``reduct_admin.adapters.token_responses``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests import exceptions as req_exc

from reduct_admin.adapters.api_errors import TransportInterruptedError, TransportIOError
from reduct_admin.domain.ports import ApiRequest, ApiResponse


@dataclass
class HttpConfig:
    """Timeout configuration for admin API calls.

    Attributes:
        request_timeout_s: Timeout in seconds for connect and read.
        verify_tls: Whether to verify server certificates on HTTPS.
    """
    request_timeout_s: float = 10.0
    verify_tls: bool = True


class RequestsTransport:
    """``requests`` implementation of ``HttpTransport``.

    This class is intentionally transport-only. It never retries and never
    inspects status codes; callers decide how to map responses into domain
    results or errors.
    """

    def __init__(
        self,
        cfg: Optional[HttpConfig] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Create a transport around a persistent session.

        Args:
            cfg: Timeout settings, defaults to ``HttpConfig()``.
            session: Optional pre-configured session (proxies, adapters).

        Side Effects:
            Creates a ``requests.Session`` when none is supplied.
        """
        self.cfg = cfg or HttpConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(__name__)

    def send(self, request: ApiRequest) -> ApiResponse:
        """Send ``request`` once and return status code and body text.

        Raises:
            TransportInterruptedError: If waiting for the response was interrupted.
            TransportIOError: For connection errors, timeouts, and other
                ``requests`` failures.
        """
        context = f"{request.method} {request.url}"
        try:
            resp = self.session.request(
                request.method,
                request.url,
                data=None if request.body is None else request.body.encode("utf-8"),
                headers=dict(request.headers),
                timeout=self.cfg.request_timeout_s,
                verify=self.cfg.verify_tls,
            )
        except InterruptedError as exc:
            raise TransportInterruptedError(
                f"Interrupted while waiting for {request.url}", context=context
            ) from exc
        except req_exc.Timeout as exc:
            self._log.debug("Transport failure for %s: %s", context, exc)
            raise TransportIOError(f"Timeout contacting {request.url}", context=context) from exc
        except req_exc.ConnectionError as exc:
            self._log.debug("Transport failure for %s: %s", context, exc)
            raise TransportIOError(f"Could not connect to {request.url}", context=context) from exc
        except req_exc.RequestException as exc:
            self._log.debug("Transport failure for %s: %s", context, exc)
            raise TransportIOError(str(exc), context=context) from exc
        return ApiResponse(status_code=resp.status_code, body=resp.text)

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["HttpConfig", "RequestsTransport"]
