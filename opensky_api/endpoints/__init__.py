"""Endpoint operations for the OpenSky REST API."""

from .base import OpenSkyService
from .flights import GetAllFlights, GetArrivals, GetDepartures, GetFlights
from .states import GetAllStateVectors, GetOwnStateVectors
from .tracks import GetTracks

__all__ = [
    "GetAllFlights",
    "GetArrivals",
    "GetDepartures",
    "GetFlights",
    "GetAllStateVectors",
    "GetOwnStateVectors",
    "GetTracks",
    "OpenSkyService",
]
