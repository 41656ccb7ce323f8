"""Trajectory lookup for a single aircraft."""

from __future__ import annotations

from typing import Any, Optional

from opensky_api.models.identifiers import ICAO24
from opensky_api.models.parameters import TimeInterval
from opensky_api.models.tracks import Track
from opensky_api.services.decoding import decode_track
from opensky_api.services.query import QueryItem, encode_params
from opensky_api.services.validation import UNCONSTRAINED_POLICY

from .base import OpenSkyService


class GetTracks(OpenSkyService[Optional[Track]]):
    """Track of one aircraft at a given time; ``time=0`` asks for the live track.

    Resolves to ``None`` when the API has no track for the aircraft.
    """

    path = "tracks/all"
    interval_policy = UNCONSTRAINED_POLICY

    def __init__(self, transponder: ICAO24 | str, time: int = 0, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.transponder = ICAO24.coerce(transponder)
        self.time = self._validate_interval(TimeInterval(time, time)).begin

    def query_items(self) -> list[QueryItem]:
        return encode_params({"icao24": self.transponder, "time": self.time})

    def decode(self, payload: Any) -> Optional[Track]:
        return decode_track(payload)

    def empty_result(self) -> Optional[Track]:
        return None


__all__ = ["GetTracks"]
