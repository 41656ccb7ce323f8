"""Transponder identifiers used to filter and correlate aircraft."""

from __future__ import annotations

import re

from opensky_api.errors import InvalidIdentifier

_ICAO24_RE = re.compile(r"[0-9a-fA-F]{6}")


class ICAO24:
    """A 24-bit Mode S transponder address.

    The canonical form is six lower-case hexadecimal digits, which is how the
    OpenSky API expects and returns it. Instances are immutable and compare
    and hash by their normalized value.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        if not isinstance(value, str) or not _ICAO24_RE.fullmatch(value):
            raise InvalidIdentifier(value)
        object.__setattr__(self, "_value", value.lower())

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ICAO24 is immutable")

    @property
    def value(self) -> str:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ICAO24):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"ICAO24({self._value!r})"

    def __str__(self) -> str:
        return self._value

    @classmethod
    def coerce(cls, value: ICAO24 | str) -> ICAO24:
        """Return ``value`` as an identifier, validating strings."""

        if isinstance(value, cls):
            return value
        return cls(value)


__all__ = ["ICAO24"]
