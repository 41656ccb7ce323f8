"""Turn raw API responses into typed results."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from opensky_api.errors import MalformedResponse, RequestFailed
from opensky_api.models.flights import Flight
from opensky_api.models.states import StateVectors, decode_state_vector
from opensky_api.models.tracks import Track, decode_waypoint
from opensky_api.services.transport import TransportResponse

logger = logging.getLogger("opensky.decoding")

T = TypeVar("T")

_FLIGHTS = TypeAdapter(list[Flight])


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    extra = f" (+{exc.error_count() - 1} more)" if exc.error_count() > 1 else ""
    return f"{location}: {first['msg']}{extra}"


def parse_json(body: str | bytes) -> Any:
    try:
        return json.loads(body)
    except (TypeError, ValueError) as exc:
        raise MalformedResponse(f"Response body is not valid JSON: {exc}") from exc


def _validate(model: type[BaseModel], payload: Any, what: str) -> Any:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponse(f"Malformed {what} at {_describe(exc)}") from exc


def decode_flights(payload: Any) -> list[Flight]:
    try:
        return _FLIGHTS.validate_python(payload)
    except ValidationError as exc:
        raise MalformedResponse(f"Malformed flight list at {_describe(exc)}") from exc


def decode_state_vectors(payload: Any) -> StateVectors:
    return _validate(StateVectors, payload, "state vectors")


def decode_track(payload: Any) -> Track:
    return _validate(Track, payload, "track")


def decode_response(
    response: TransportResponse,
    decoder: Callable[[Any], T],
    empty: Callable[[], T],
) -> T:
    """Map a status code and body to a typed result.

    200 decodes the body, 404 is the API's way of saying nothing matched and
    yields ``empty()``, anything else raises :class:`RequestFailed`.
    """

    if response.status_code == 200:
        return decoder(parse_json(response.body))
    if response.status_code == 404:
        logger.debug("OpenSky returned 404; treating as an empty result")
        return empty()

    logger.warning(
        "OpenSky returned HTTP %s: %s", response.status_code, response.body[:200]
    )
    raise RequestFailed(response.status_code, response.body)


__all__ = [
    "decode_flights",
    "decode_response",
    "decode_state_vector",
    "decode_state_vectors",
    "decode_track",
    "decode_waypoint",
    "parse_json",
]
