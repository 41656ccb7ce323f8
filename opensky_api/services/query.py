"""Query-string encoding for OpenSky requests."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, NamedTuple


class QueryItem(NamedTuple):
    """A single ``name=value`` query parameter."""

    name: str
    value: str


def encode_params(params: Mapping[str, Any]) -> list[QueryItem]:
    """Encode scalar parameters in mapping order.

    ``True`` is sent as ``1``; ``False`` and ``None`` are left out since the
    API treats an absent flag as off.
    """

    items: list[QueryItem] = []
    for name, value in params.items():
        if value is None or value is False:
            continue
        if value is True:
            items.append(QueryItem(name, "1"))
        else:
            items.append(QueryItem(name, str(value)))
    return items


def encode_sequence(name: str, values: Iterable[Any]) -> list[QueryItem]:
    """Encode an array parameter by repeating ``name`` once per element."""

    return [QueryItem(name, str(value)) for value in values]


__all__ = ["QueryItem", "encode_params", "encode_sequence"]
