import httpx
import pytest
import structlog

from geocountry.core import logger as logger_module


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
    logger_module._configured = False


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
def make_transport(requests_seen):
    """Transport answering every request with the given body and status."""

    def _make(body: str = "US", status_code: int = 200):
        def handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return httpx.Response(
                status_code,
                text=body,
                headers={"content-type": "text/plain"},
            )

        return httpx.MockTransport(handler)

    return _make


@pytest.fixture
def failing_transport(requests_seen):
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(handler)
