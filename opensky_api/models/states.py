"""State vector models for the ``states/*`` endpoints."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from opensky_api.errors import MalformedResponse
from opensky_api.models.positional import check_arity, read_slot

# Slot 17 (category) is only present when the extended flag was requested.
STATE_VECTOR_LENGTHS = (17, 18)


class StateVector(BaseModel):
    """Snapshot of one aircraft's identity, position and velocity."""

    icao24: str = Field(..., description="Transponder address in lower-case hex")
    callsign: Optional[str] = Field(default=None, description="Callsign, may be padded")
    origin_country: str = Field(..., description="Country inferred from the address")
    time_position: Optional[int] = Field(
        default=None, description="Time of the last position update"
    )
    last_contact: int = Field(..., description="Time of the last message received")
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    baro_altitude: Optional[float] = Field(default=None, description="Meters")
    on_ground: bool
    velocity: Optional[float] = Field(default=None, description="Ground speed in m/s")
    true_track: Optional[float] = Field(
        default=None, description="Degrees clockwise from north"
    )
    vertical_rate: Optional[float] = Field(default=None, description="m/s")
    sensors: Optional[tuple[int, ...]] = Field(
        default=None, description="Receiver serials contributing to this state"
    )
    geo_altitude: Optional[float] = Field(default=None, description="Meters")
    squawk: Optional[str] = None
    spi: bool = Field(..., description="Special purpose indicator")
    position_source: int = Field(
        ..., description="0 = ADS-B, 1 = ASTERIX, 2 = MLAT, 3 = FLARM"
    )
    category: Optional[int] = Field(
        default=None, description="Aircraft category, extended requests only"
    )

    model_config = ConfigDict(frozen=True)


def decode_state_vector(raw: Any) -> StateVector:
    """Decode one positional state array of 17 or 18 elements."""

    check_arity(raw, STATE_VECTOR_LENGTHS, "state")

    def slot(index: int, field: str, kind: str, nullable: bool = False) -> Any:
        return read_slot(raw, index, field, kind, nullable=nullable, record="state")

    return StateVector(
        icao24=slot(0, "icao24", "str"),
        callsign=slot(1, "callsign", "str", nullable=True),
        origin_country=slot(2, "origin_country", "str"),
        time_position=slot(3, "time_position", "int", nullable=True),
        last_contact=slot(4, "last_contact", "int"),
        longitude=slot(5, "longitude", "number", nullable=True),
        latitude=slot(6, "latitude", "number", nullable=True),
        baro_altitude=slot(7, "baro_altitude", "number", nullable=True),
        on_ground=slot(8, "on_ground", "bool"),
        velocity=slot(9, "velocity", "number", nullable=True),
        true_track=slot(10, "true_track", "number", nullable=True),
        vertical_rate=slot(11, "vertical_rate", "number", nullable=True),
        sensors=slot(12, "sensors", "int_list", nullable=True),
        geo_altitude=slot(13, "geo_altitude", "number", nullable=True),
        squawk=slot(14, "squawk", "str", nullable=True),
        spi=slot(15, "spi", "bool"),
        position_source=slot(16, "position_source", "int"),
        category=slot(17, "category", "int", nullable=True) if len(raw) == 18 else None,
    )


class StateVectors(BaseModel):
    """All state vectors reported for one point in time."""

    time: int = Field(..., description="Time the states are associated with")
    states: tuple[StateVector, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    @field_validator("states", mode="before")
    @classmethod
    def _decode_states(cls, value: Any) -> Any:
        if value is None:
            return ()
        if not isinstance(value, (list, tuple)):
            raise MalformedResponse(f"states must be a JSON array, got {type(value).__name__}")

        states = []
        for index, entry in enumerate(value):
            if isinstance(entry, StateVector):
                states.append(entry)
                continue
            try:
                states.append(decode_state_vector(entry))
            except MalformedResponse as exc:
                raise MalformedResponse(f"states[{index}]: {exc}") from exc
        return tuple(states)


__all__ = ["STATE_VECTOR_LENGTHS", "StateVector", "StateVectors", "decode_state_vector"]
