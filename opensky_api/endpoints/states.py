"""State vector lookups for all aircraft or for your own receivers."""

from __future__ import annotations

from typing import Any, Iterable

from opensky_api.models.identifiers import ICAO24
from opensky_api.models.parameters import AreaBoundingBox, TimeInterval
from opensky_api.models.states import StateVectors
from opensky_api.services.decoding import decode_state_vectors
from opensky_api.services.query import QueryItem, encode_params, encode_sequence
from opensky_api.services.validation import UNCONSTRAINED_POLICY

from .base import OpenSkyService, now_epoch, require_transponders


class _StateVectorsService(OpenSkyService[StateVectors]):
    interval_policy = UNCONSTRAINED_POLICY

    time: int | None = None

    def _validate_time(self, time: int | None) -> int | None:
        if time is None:
            return None
        return self._validate_interval(TimeInterval(time, time)).begin

    def decode(self, payload: Any) -> StateVectors:
        return decode_state_vectors(payload)

    def empty_result(self) -> StateVectors:
        return StateVectors(time=self.time if self.time is not None else now_epoch())


class GetAllStateVectors(_StateVectorsService):
    """State vectors for every aircraft, optionally filtered.

    Without ``time`` the API answers with the most recent states. Anonymous
    callers only get current states at a coarse resolution.
    """

    path = "states/all"

    def __init__(
        self,
        *,
        time: int | None = None,
        transponders: Iterable[ICAO24 | str] | None = None,
        area: AreaBoundingBox | None = None,
        include_category: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.time = self._validate_time(time)
        self.transponders = tuple(ICAO24.coerce(value) for value in (transponders or ()))
        self.area = area
        self.include_category = include_category

    def query_items(self) -> list[QueryItem]:
        items = encode_params({"time": self.time})
        items.extend(encode_sequence("icao24", self.transponders))
        if self.area is not None:
            items.extend(encode_params(self.area.model_dump()))
        items.extend(encode_params({"extended": self.include_category}))
        return items


class GetOwnStateVectors(_StateVectorsService):
    """State vectors seen by your own receivers; requires authentication."""

    path = "states/own"

    def __init__(
        self,
        transponders: Iterable[ICAO24 | str],
        *,
        time: int | None = None,
        serials: Iterable[int] | None = None,
        include_category: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.transponders = require_transponders(transponders)
        self.time = self._validate_time(now_epoch() if time is None else time)
        self.serials = tuple(serials or ())
        self.include_category = include_category

    def query_items(self) -> list[QueryItem]:
        items = encode_sequence("icao24", self.transponders)
        items.extend(encode_sequence("serials", self.serials))
        items.extend(encode_params({"time": self.time, "extended": self.include_category}))
        return items


__all__ = ["GetAllStateVectors", "GetOwnStateVectors"]
