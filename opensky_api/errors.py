"""Exception hierarchy raised by the OpenSky API client."""

from __future__ import annotations

import asyncio


class OpenSkyError(Exception):
    """Base class for every error raised by the client."""


class InvalidIdentifier(OpenSkyError, ValueError):
    """Raised when a transponder address is not exactly six hex digits."""

    def __init__(self, value: object):
        super().__init__(f"Invalid ICAO24 transponder address: {value!r}")
        self.value = value


class IntervalInvalid(OpenSkyError, ValueError):
    """Raised when a time interval is reversed, negative or empty where disallowed."""


class IntervalTooLarge(OpenSkyError, ValueError):
    """Raised when a time interval spans more than the endpoint allows."""

    def __init__(self, span: int, max_span: int):
        super().__init__(
            f"Time interval spans {span} seconds; the endpoint allows at most {max_span}"
        )
        self.span = span
        self.max_span = max_span


class EmptyParameterSet(OpenSkyError, ValueError):
    """Raised when a required collection parameter is empty."""


class RequestFailed(OpenSkyError):
    """Raised when the API answers with a status other than 200 or 404."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"OpenSky request failed with HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class MalformedResponse(OpenSkyError):
    """Raised when a response body does not match the expected shape."""


class TransportError(OpenSkyError):
    """Raised when the request could not be delivered or answered."""


class Cancelled(asyncio.CancelledError):
    """Raised when an in-flight request is cancelled.

    Derives from :class:`asyncio.CancelledError` so task cancellation keeps
    propagating through callers that do not handle it explicitly.
    """


__all__ = [
    "Cancelled",
    "EmptyParameterSet",
    "IntervalInvalid",
    "IntervalTooLarge",
    "InvalidIdentifier",
    "MalformedResponse",
    "OpenSkyError",
    "RequestFailed",
    "TransportError",
]
