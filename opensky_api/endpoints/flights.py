"""Flight lookups by time interval, airport or aircraft."""

from __future__ import annotations

from typing import Any, Iterable

from opensky_api.errors import EmptyParameterSet
from opensky_api.models.flights import Flight
from opensky_api.models.identifiers import ICAO24
from opensky_api.models.parameters import TimeInterval
from opensky_api.services.decoding import decode_flights
from opensky_api.services.query import QueryItem, encode_params, encode_sequence
from opensky_api.services.validation import AIRCRAFT_POLICY, AIRPORT_POLICY

from .base import OpenSkyService, require_transponders


class _FlightListService(OpenSkyService[list[Flight]]):
    def decode(self, payload: Any) -> list[Flight]:
        return decode_flights(payload)

    def empty_result(self) -> list[Flight]:
        return []


class GetAllFlights(_FlightListService):
    """Flights seen anywhere within an interval of at most two hours."""

    path = "flights/all"

    def __init__(self, interval: TimeInterval | tuple[int, int], **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.interval = self._validate_interval(interval)

    def query_items(self) -> list[QueryItem]:
        return encode_params({"begin": self.interval.begin, "end": self.interval.end})


class _AirportFlightsService(_FlightListService):
    interval_policy = AIRPORT_POLICY

    def __init__(
        self, airport: str, interval: TimeInterval | tuple[int, int], **kwargs: Any
    ) -> None:
        super().__init__(**kwargs)
        self.airport = (airport or "").strip()
        if not self.airport:
            raise EmptyParameterSet("An ICAO airport code is required")
        self.interval = self._validate_interval(interval)

    def query_items(self) -> list[QueryItem]:
        return encode_params(
            {
                "airport": self.airport,
                "begin": self.interval.begin,
                "end": self.interval.end,
            }
        )


class GetArrivals(_AirportFlightsService):
    """Flights that arrived at an airport within at most seven days."""

    path = "flights/arrival"


class GetDepartures(_AirportFlightsService):
    """Flights that departed from an airport within at most seven days."""

    path = "flights/departure"


class GetFlights(_FlightListService):
    """Flights flown by a set of aircraft within at most thirty days."""

    path = "flights/aircraft"
    interval_policy = AIRCRAFT_POLICY

    def __init__(
        self,
        transponders: Iterable[ICAO24 | str],
        interval: TimeInterval | tuple[int, int],
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        # The transponder check runs first; the API ignores calls without one.
        self.transponders = require_transponders(transponders)
        self.interval = self._validate_interval(interval)

    def query_items(self) -> list[QueryItem]:
        items = encode_sequence("icao24", self.transponders)
        items.extend(encode_params({"begin": self.interval.begin, "end": self.interval.end}))
        return items


__all__ = ["GetAllFlights", "GetArrivals", "GetDepartures", "GetFlights"]
