from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
from requests import exceptions as req_exc

from reduct_admin.adapters.api_errors import TransportInterruptedError, TransportIOError
from reduct_admin.adapters.http_client import HttpConfig, RequestsTransport
from reduct_admin.domain.ports import ApiRequest, ApiResponse


class _ResponseStub:
    def __init__(self, status_code: int, text: str) -> None:
        self.status_code = status_code
        self.text = text


class _SessionStub:
    def __init__(self, *, response: Optional[_ResponseStub] = None, error: Optional[BaseException] = None) -> None:
        self._response = response
        self._error = error
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> _ResponseStub:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self._error is not None:
            raise self._error
        assert self._response is not None
        return self._response

    def close(self) -> None:
        self.closed = True


REQUEST = ApiRequest(
    method="POST",
    url="http://localhost:8383/api/v1/tokens/test",
    headers={"Authorization": "Bearer t", "Content-Type": "application/json"},
    body='{"full_access": true}',
)


def test_send_passes_request_through_and_returns_status_and_text() -> None:
    session = _SessionStub(response=_ResponseStub(200, '{"value": "x"}'))
    transport = RequestsTransport(HttpConfig(request_timeout_s=3.5), session=session)  # type: ignore[arg-type]

    response = transport.send(REQUEST)

    assert response == ApiResponse(200, '{"value": "x"}')
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == REQUEST.url
    assert call["data"] == b'{"full_access": true}'
    assert call["headers"] == REQUEST.headers
    assert call["timeout"] == 3.5
    assert call["verify"] is True


def test_send_without_body_sends_no_data() -> None:
    session = _SessionStub(response=_ResponseStub(204, ""))
    transport = RequestsTransport(session=session)  # type: ignore[arg-type]

    transport.send(ApiRequest(method="GET", url="http://localhost:8383/api/v1/tokens"))

    assert session.calls[0]["data"] is None
    assert session.calls[0]["timeout"] == HttpConfig().request_timeout_s


@pytest.mark.parametrize(
    "error",
    [
        req_exc.ConnectionError("refused"),
        req_exc.Timeout("slow"),
        req_exc.TooManyRedirects("loop"),
    ],
)
def test_requests_failures_become_io_errors(error: BaseException) -> None:
    transport = RequestsTransport(session=_SessionStub(error=error))  # type: ignore[arg-type]

    with pytest.raises(TransportIOError) as excinfo:
        transport.send(REQUEST)

    assert excinfo.value.context == f"POST {REQUEST.url}"
    assert excinfo.value.__cause__ is error


def test_interrupt_becomes_interrupted_error() -> None:
    transport = RequestsTransport(session=_SessionStub(error=InterruptedError()))  # type: ignore[arg-type]

    with pytest.raises(TransportInterruptedError):
        transport.send(REQUEST)


def test_context_manager_closes_session() -> None:
    session = _SessionStub(response=_ResponseStub(200, ""))

    with RequestsTransport(session=session) as transport:  # type: ignore[arg-type]
        transport.send(REQUEST)

    assert session.closed is True


@pytest.mark.parametrize(
    "error, message",
    [
        (req_exc.ConnectionError("refused"), f"Could not connect to {REQUEST.url}"),
        (req_exc.ReadTimeout("slow"), f"Timeout contacting {REQUEST.url}"),
        (req_exc.ConnectTimeout("slow"), f"Timeout contacting {REQUEST.url}"),
    ],
)
def test_io_error_message_names_the_failure(error: BaseException, message: str) -> None:
    transport = RequestsTransport(session=_SessionStub(error=error))  # type: ignore[arg-type]

    with pytest.raises(TransportIOError) as excinfo:
        transport.send(REQUEST)

    assert str(excinfo.value) == message
