"""Typed asynchronous client for the OpenSky Network REST API."""

from .endpoints import (
    GetAllFlights,
    GetAllStateVectors,
    GetArrivals,
    GetDepartures,
    GetFlights,
    GetOwnStateVectors,
    GetTracks,
    OpenSkyService,
)
from .errors import (
    Cancelled,
    EmptyParameterSet,
    IntervalInvalid,
    IntervalTooLarge,
    InvalidIdentifier,
    MalformedResponse,
    OpenSkyError,
    RequestFailed,
    TransportError,
)
from .models import (
    AreaBoundingBox,
    Authentication,
    Flight,
    ICAO24,
    StateVector,
    StateVectors,
    TimeInterval,
    Track,
    Waypoint,
)

__all__ = [
    "AreaBoundingBox",
    "Authentication",
    "Cancelled",
    "EmptyParameterSet",
    "Flight",
    "GetAllFlights",
    "GetAllStateVectors",
    "GetArrivals",
    "GetDepartures",
    "GetFlights",
    "GetOwnStateVectors",
    "GetTracks",
    "ICAO24",
    "IntervalInvalid",
    "IntervalTooLarge",
    "InvalidIdentifier",
    "MalformedResponse",
    "OpenSkyError",
    "OpenSkyService",
    "RequestFailed",
    "StateVector",
    "StateVectors",
    "TimeInterval",
    "Track",
    "TransportError",
    "Waypoint",
]
