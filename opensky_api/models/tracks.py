"""Track and waypoint models for the ``tracks/all`` endpoint."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from opensky_api.errors import MalformedResponse
from opensky_api.models.identifiers import ICAO24
from opensky_api.models.positional import check_arity, read_slot


class Waypoint(BaseModel):
    """One point along the historical path of a flight."""

    time: int = Field(..., description="Seconds since the Unix epoch")
    latitude: Optional[float] = Field(default=None, description="WGS-84 latitude in degrees")
    longitude: Optional[float] = Field(default=None, description="WGS-84 longitude in degrees")
    altitude: Optional[float] = Field(default=None, description="Barometric altitude in meters")
    true_track: Optional[float] = Field(
        default=None, description="Track in degrees clockwise from north"
    )
    on_ground: bool = Field(
        ..., description="Whether the position came from a surface position report"
    )

    model_config = ConfigDict(frozen=True)

    def to_wire(self) -> list[Any]:
        """Render the waypoint in the API's positional array form."""

        return [
            self.time,
            self.latitude,
            self.longitude,
            self.altitude,
            self.true_track,
            self.on_ground,
        ]


def decode_waypoint(raw: Any) -> Waypoint:
    """Decode ``[time, lat, lon, baro_altitude, true_track, on_ground]``.

    The array must have exactly six elements. Time and the ground flag are
    mandatory; the four measurements are independently nullable.
    """

    check_arity(raw, (6,), "waypoint")
    return Waypoint(
        time=read_slot(raw, 0, "time", "int", record="waypoint"),
        latitude=read_slot(raw, 1, "latitude", "number", nullable=True, record="waypoint"),
        longitude=read_slot(raw, 2, "longitude", "number", nullable=True, record="waypoint"),
        altitude=read_slot(raw, 3, "baro_altitude", "number", nullable=True, record="waypoint"),
        true_track=read_slot(raw, 4, "true_track", "number", nullable=True, record="waypoint"),
        on_ground=read_slot(raw, 5, "on_ground", "bool", record="waypoint"),
    )


class Track(BaseModel):
    """Trajectory of one aircraft; ``path`` is in chronological order."""

    icao24: str = Field(..., description="ICAO 24-bit address in lower-case hex")
    start_time: int = Field(..., description="Time of the first waypoint")
    end_time: int = Field(..., description="Time of the last waypoint")
    callsign: Optional[str] = Field(
        default=None, description="Callsign that holds for the whole track"
    )
    path: tuple[Waypoint, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("path", mode="before")
    @classmethod
    def _decode_path(cls, value: Any) -> Any:
        if value is None:
            return ()
        if not isinstance(value, (list, tuple)):
            raise MalformedResponse(f"track path must be a JSON array, got {type(value).__name__}")

        waypoints = []
        for index, entry in enumerate(value):
            if isinstance(entry, Waypoint):
                waypoints.append(entry)
                continue
            try:
                waypoints.append(decode_waypoint(entry))
            except MalformedResponse as exc:
                raise MalformedResponse(f"path[{index}]: {exc}") from exc
        return tuple(waypoints)

    @field_serializer("path")
    def _encode_path(self, path: tuple[Waypoint, ...]) -> list[list[Any]]:
        return [waypoint.to_wire() for waypoint in path]

    @property
    def transponder(self) -> ICAO24:
        return ICAO24(self.icao24)


__all__ = ["Track", "Waypoint", "decode_waypoint"]
