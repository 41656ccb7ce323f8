"""Helpers for decoding fixed-order JSON arrays into records.

Some OpenSky payloads (track waypoints, state vectors) are arrays whose
field identity is given purely by position. Each slot is read by index with
an explicit expected kind; nothing is inferred from the value's type.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from opensky_api.errors import MalformedResponse


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int_list(value: Any) -> bool:
    return isinstance(value, list) and all(_is_int(item) for item in value)


_KINDS: dict[str, tuple[Callable[[Any], bool], Callable[[Any], Any]]] = {
    "int": (_is_int, int),
    "number": (_is_number, float),
    "bool": (lambda value: isinstance(value, bool), bool),
    "str": (lambda value: isinstance(value, str), str),
    "int_list": (_is_int_list, tuple),
}


def check_arity(raw: Any, allowed: Sequence[int], record: str) -> None:
    """Fail unless ``raw`` is a JSON array with one of the allowed lengths."""

    if not isinstance(raw, (list, tuple)):
        raise MalformedResponse(
            f"{record} must be a JSON array, got {type(raw).__name__}"
        )
    if len(raw) not in allowed:
        expected = " or ".join(str(length) for length in allowed)
        raise MalformedResponse(
            f"{record} must have {expected} elements, got {len(raw)}"
        )


def read_slot(
    raw: Sequence[Any],
    index: int,
    field: str,
    kind: str,
    *,
    nullable: bool = False,
    record: str = "record",
) -> Any:
    """Read and convert the value at ``index``.

    ``None`` is only accepted for nullable slots. Any other mismatch between
    the value and ``kind`` raises :class:`MalformedResponse` naming the slot.
    """

    value = raw[index]
    if value is None:
        if nullable:
            return None
        raise MalformedResponse(f"{record}[{index}] ({field}) is required but was null")

    accepts, convert = _KINDS[kind]
    if not accepts(value):
        raise MalformedResponse(
            f"{record}[{index}] ({field}) expected {kind}, got {value!r}"
        )
    return convert(value)


__all__ = ["check_arity", "read_slot"]
