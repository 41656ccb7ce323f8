"""Request parameter models shared by the endpoint operations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from opensky_api.errors import IntervalInvalid


@dataclass(frozen=True)
class TimeInterval:
    """Closed range ``[begin, end]`` in seconds since the Unix epoch."""

    begin: int
    end: int

    def __post_init__(self) -> None:
        for name in ("begin", "end"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise IntervalInvalid(f"Interval {name} must be an integer, got {value!r}")
            if value < 0:
                raise IntervalInvalid(f"Interval {name} must not be negative, got {value}")

    @property
    def span(self) -> int:
        return self.end - self.begin

    @classmethod
    def from_datetimes(cls, start: datetime, end: datetime) -> TimeInterval:
        """Build an interval from two datetimes; naive values are taken as UTC."""

        def _to_epoch(value: datetime) -> int:
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            return int(value.timestamp())

        return cls(_to_epoch(start), _to_epoch(end))

    @classmethod
    def coerce(cls, value: Union[TimeInterval, tuple[int, int]]) -> TimeInterval:
        if isinstance(value, cls):
            return value
        try:
            begin, end = value
        except (TypeError, ValueError):
            raise IntervalInvalid(f"Expected a (begin, end) pair, got {value!r}") from None
        return cls(begin, end)


class AreaBoundingBox(BaseModel):
    """WGS-84 bounding box used to filter state vectors."""

    lamin: float = Field(..., description="Lower bound for the latitude in decimal degrees")
    lomin: float = Field(..., description="Lower bound for the longitude in decimal degrees")
    lamax: float = Field(..., description="Upper bound for the latitude in decimal degrees")
    lomax: float = Field(..., description="Upper bound for the longitude in decimal degrees")

    model_config = ConfigDict(frozen=True)


class Authentication(BaseModel):
    """HTTP Basic credentials attached to a single request."""

    username: str = Field(..., description="OpenSky account user name")
    password: SecretStr = Field(..., description="OpenSky account password")

    model_config = ConfigDict(frozen=True)


__all__ = ["AreaBoundingBox", "Authentication", "TimeInterval"]
