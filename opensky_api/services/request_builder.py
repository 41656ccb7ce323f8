"""Compose ready-to-send GET request descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence
from urllib.parse import urlencode

import httpx

from opensky_api.models.parameters import Authentication
from opensky_api.services.query import QueryItem


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything a transport needs to issue one GET request.

    Credentials are carried alongside the URL and are excluded from ``repr``.
    """

    url: str
    query_items: tuple[QueryItem, ...] = ()
    authentication: Authentication | None = field(default=None, repr=False)
    method: str = "GET"

    @property
    def path(self) -> str:
        return httpx.URL(self.url).path


def build_request(
    base_url: str,
    path: str,
    query_items: Sequence[QueryItem],
    authentication: Authentication | None = None,
) -> RequestDescriptor:
    """Join ``path`` onto ``base_url`` and append the query in item order."""

    if not base_url.endswith("/"):
        base_url = f"{base_url}/"
    url = httpx.URL(base_url).join(path.lstrip("/"))
    if query_items:
        # urlencode keeps repeated names in caller order; QueryParams would group them
        url = url.copy_with(query=urlencode(list(query_items)).encode("ascii"))
    return RequestDescriptor(
        url=str(url),
        query_items=tuple(query_items),
        authentication=authentication,
    )


__all__ = ["RequestDescriptor", "build_request"]
