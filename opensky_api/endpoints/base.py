"""Shared behavior for OpenSky endpoint operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
import asyncio
from datetime import datetime, timezone
import logging
from typing import Any, ClassVar, Generic, Iterable, TypeVar

from opensky_api.config import settings
from opensky_api.errors import Cancelled, EmptyParameterSet
from opensky_api.models.identifiers import ICAO24
from opensky_api.models.parameters import Authentication, TimeInterval
from opensky_api.services.decoding import decode_response
from opensky_api.services.query import QueryItem
from opensky_api.services.request_builder import RequestDescriptor, build_request
from opensky_api.services.transport import HttpxTransport, Transport
from opensky_api.services.validation import (
    DEFAULT_POLICY,
    IntervalPolicy,
    validate_time_interval,
)

logger = logging.getLogger("opensky.endpoints")

T = TypeVar("T")


def now_epoch() -> int:
    return int(datetime.now(timezone.utc).timestamp())


def _task_is_cancelling() -> bool:
    """Whether the running task has a pending cancel request (Python 3.11+)."""

    task = asyncio.current_task()
    cancelling = getattr(task, "cancelling", None)
    return bool(cancelling and cancelling())


def require_transponders(values: Iterable[ICAO24 | str] | None) -> tuple[ICAO24, ...]:
    """Validate a non-empty set of transponder addresses, keeping order."""

    transponders = tuple(ICAO24.coerce(value) for value in (values or ()))
    if not transponders:
        raise EmptyParameterSet("At least one ICAO24 transponder address is required")
    return transponders


class OpenSkyService(ABC, Generic[T]):
    """One request/response cycle against a fixed OpenSky endpoint.

    Subclasses set ``path`` and, when the endpoint limits the time range,
    ``interval_policy``. Parameters are validated in the constructor so an
    invalid operation never reaches the transport.
    """

    path: ClassVar[str]
    interval_policy: ClassVar[IntervalPolicy] = DEFAULT_POLICY

    def __init__(
        self,
        *,
        authentication: Authentication | None = None,
        transport: Transport | None = None,
        base_url: str | None = None,
    ) -> None:
        self.authentication = authentication
        self.transport = transport
        self.base_url = base_url or settings.api_base_url

    def _validate_interval(self, interval: Any) -> TimeInterval:
        return validate_time_interval(TimeInterval.coerce(interval), self.interval_policy)

    @abstractmethod
    def query_items(self) -> list[QueryItem]:
        ...

    @abstractmethod
    def decode(self, payload: Any) -> T:
        ...

    @abstractmethod
    def empty_result(self) -> T:
        ...

    def build_request(self) -> RequestDescriptor:
        return build_request(
            self.base_url, self.path, self.query_items(), self.authentication
        )

    async def invoke(self) -> T:
        """Send the request and decode the response."""

        request = self.build_request()
        transport = self.transport or HttpxTransport()
        logger.debug("GET %s", request.url)

        try:
            response = await transport.send(request)
        except asyncio.CancelledError as exc:
            logger.info("OpenSky request to %s cancelled", request.path)
            # asyncio.timeout and TaskGroup match on the original exception
            if _task_is_cancelling():
                raise
            raise Cancelled(f"Request to {request.path} was cancelled") from exc

        result = decode_response(response, self.decode, self.empty_result)
        logger.debug("OpenSky %s answered HTTP %s", request.path, response.status_code)
        return result


__all__ = ["OpenSkyService", "now_epoch", "require_transponders"]
