"""
Time source used for webhook timestamps.

Handlers never call ``datetime.now`` directly: the application owns a clock
(any zero-argument callable returning an aware ``datetime``) so tests can pin
the current time.
"""
from datetime import datetime, timezone
from typing import Callable

from fastapi import Request

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: current time in UTC."""
    return datetime.now(timezone.utc)


def to_iso(moment: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with milliseconds, e.g. 2026-01-01T10:00:00.000Z"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S") + f".{moment.microsecond // 1000:03d}Z"


def get_clock(request: Request) -> Clock:
    """FastAPI dependency returning the clock owned by the running app."""
    return request.app.state.clock
