import json

import pytest

from opensky_api.services.transport import TransportResponse


class FakeTransport:
    def __init__(self, status_code: int = 200, payload=None, body: str | None = None):
        self.status_code = status_code
        self.body = body if body is not None else json.dumps(payload)
        self.requests = []

    async def send(self, request):
        self.requests.append(request)
        return TransportResponse(self.status_code, self.body)


@pytest.fixture
def fake_transport():
    def factory(status_code: int = 200, payload=None, body: str | None = None):
        return FakeTransport(status_code=status_code, payload=payload, body=body)

    return factory


@pytest.fixture
def anyio_backend():
    return "asyncio"
