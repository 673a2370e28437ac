import httpx
import pytest

from uphold_mcp.client import UpholdClient

BASE_URL = "https://api.test.com"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send."""

    def __init__(self, handler):
        self.requests = []

        def record(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def make_transport():
    def factory(status_code=200, json=None, text=None, stream=None):
        def handler(request):
            if stream is not None:
                return httpx.Response(status_code, stream=stream)
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json)
        return RecordingTransport(handler)
    return factory


@pytest.fixture
def make_client(make_transport):
    def factory(**response):
        transport = make_transport(**response)
        return UpholdClient(BASE_URL, user_agent="uphold-mcp-server/1.0.0", transport=transport), transport
    return factory


@pytest.fixture
def base_url():
    return BASE_URL
