"""Request building, validation and decoding shared by every endpoint."""

from .decoding import (
    decode_flights,
    decode_response,
    decode_state_vector,
    decode_state_vectors,
    decode_track,
    decode_waypoint,
    parse_json,
)
from .query import QueryItem, encode_params, encode_sequence
from .request_builder import RequestDescriptor, build_request
from .transport import HttpxTransport, Transport, TransportResponse
from .validation import (
    AIRCRAFT_POLICY,
    AIRPORT_POLICY,
    DEFAULT_POLICY,
    UNCONSTRAINED_POLICY,
    IntervalPolicy,
    validate_time_interval,
)

__all__ = [
    "AIRCRAFT_POLICY",
    "AIRPORT_POLICY",
    "DEFAULT_POLICY",
    "HttpxTransport",
    "IntervalPolicy",
    "QueryItem",
    "RequestDescriptor",
    "Transport",
    "TransportResponse",
    "UNCONSTRAINED_POLICY",
    "build_request",
    "decode_flights",
    "decode_response",
    "decode_state_vector",
    "decode_state_vectors",
    "decode_track",
    "decode_waypoint",
    "encode_params",
    "encode_sequence",
    "parse_json",
    "validate_time_interval",
]
