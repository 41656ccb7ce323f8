"""Time-interval rules applied before a request is built."""

from __future__ import annotations

from dataclasses import dataclass

from opensky_api.errors import IntervalInvalid, IntervalTooLarge
from opensky_api.models.parameters import TimeInterval

HOUR = 60 * 60
DAY = 24 * HOUR


@dataclass(frozen=True)
class IntervalPolicy:
    """Largest span an endpoint accepts; ``None`` means unconstrained."""

    max_span: int | None = 2 * HOUR
    require_nonzero: bool = False


DEFAULT_POLICY = IntervalPolicy()
AIRPORT_POLICY = IntervalPolicy(max_span=7 * DAY)
AIRCRAFT_POLICY = IntervalPolicy(max_span=30 * DAY, require_nonzero=True)
UNCONSTRAINED_POLICY = IntervalPolicy(max_span=None)


def validate_time_interval(
    interval: TimeInterval, policy: IntervalPolicy = DEFAULT_POLICY
) -> TimeInterval:
    """Check ``interval`` against ``policy`` and return it unchanged."""

    if interval.begin > interval.end:
        raise IntervalInvalid(
            f"Interval begin {interval.begin} is after end {interval.end}"
        )
    if policy.require_nonzero and interval.span == 0:
        raise IntervalInvalid("Interval must span a non-zero amount of time")
    if policy.max_span is not None and interval.span > policy.max_span:
        raise IntervalTooLarge(interval.span, policy.max_span)
    return interval


__all__ = [
    "AIRCRAFT_POLICY",
    "AIRPORT_POLICY",
    "DAY",
    "DEFAULT_POLICY",
    "HOUR",
    "IntervalPolicy",
    "UNCONSTRAINED_POLICY",
    "validate_time_interval",
]
