"""Typed models for OpenSky requests and responses."""

from .flights import Flight
from .identifiers import ICAO24
from .parameters import AreaBoundingBox, Authentication, TimeInterval
from .states import StateVector, StateVectors, decode_state_vector
from .tracks import Track, Waypoint, decode_waypoint

__all__ = [
    "AreaBoundingBox",
    "Authentication",
    "Flight",
    "ICAO24",
    "StateVector",
    "StateVectors",
    "TimeInterval",
    "Track",
    "Waypoint",
    "decode_state_vector",
    "decode_waypoint",
]
