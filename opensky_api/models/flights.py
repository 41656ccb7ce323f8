"""Flight records returned by the ``flights/*`` endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from opensky_api.models.identifiers import ICAO24


class Flight(BaseModel):
    """A single flight as estimated by OpenSky.

    Distance estimates are passed through as reported. The API does not
    document their unit or sign convention.
    """

    icao24: str = Field(..., description="Transponder address in lower-case hex")
    first_seen: int = Field(..., description="Time the flight was first seen (epoch seconds)")
    last_seen: int = Field(..., description="Time the flight was last seen (epoch seconds)")
    est_departure_airport: Optional[str] = Field(
        default=None, description="ICAO code of the estimated departure airport"
    )
    est_arrival_airport: Optional[str] = Field(
        default=None, description="ICAO code of the estimated arrival airport"
    )
    callsign: Optional[str] = Field(default=None, description="Callsign of the flight")
    est_departure_airport_horiz_distance: Optional[int] = None
    est_departure_airport_vert_distance: Optional[int] = None
    est_arrival_airport_horiz_distance: Optional[int] = None
    est_arrival_airport_vert_distance: Optional[int] = None
    departure_airport_candidates_count: int = Field(
        ..., description="Number of departure airport candidates considered"
    )
    arrival_airport_candidates_count: int = Field(
        ..., description="Number of arrival airport candidates considered"
    )

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @property
    def transponder(self) -> ICAO24:
        return ICAO24(self.icao24)


__all__ = ["Flight"]
