"""Transport boundary between the endpoint operations and HTTP."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Protocol

import httpx

from opensky_api.config import settings
from opensky_api.errors import TransportError
from opensky_api.services.request_builder import RequestDescriptor

logger = logging.getLogger("opensky.transport")


@dataclass(frozen=True)
class TransportResponse:
    """Raw outcome of a request: status code and body text."""

    status_code: int
    body: str = ""


class Transport(Protocol):
    """Anything able to deliver a request descriptor."""

    async def send(self, request: RequestDescriptor) -> TransportResponse:
        ...


class HttpxTransport:
    """Deliver requests with a short-lived ``httpx.AsyncClient``."""

    def __init__(
        self,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout = timeout or settings.timeout
        self.transport = transport

    async def send(self, request: RequestDescriptor) -> TransportResponse:
        auth = None
        if request.authentication is not None:
            auth = httpx.BasicAuth(
                request.authentication.username,
                request.authentication.password.get_secret_value(),
            )

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.request(request.method, request.url, auth=auth)
        except httpx.TimeoutException as exc:
            logger.warning("OpenSky request to %s timed out: %s", request.path, exc)
            raise TransportError(f"Request to {request.path} timed out") from exc
        except httpx.RequestError as exc:
            logger.warning("OpenSky request to %s failed: %s", request.path, exc)
            raise TransportError(f"Request to {request.path} failed: {exc}") from exc

        return TransportResponse(status_code=response.status_code, body=response.text)


__all__ = ["HttpxTransport", "Transport", "TransportResponse"]
