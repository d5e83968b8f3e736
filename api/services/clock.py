"""Process uptime and timestamp helpers."""

from __future__ import annotations

import time
from datetime import datetime, timezone

_STARTED_AT = time.monotonic()


def uptime_seconds() -> float:
    """Seconds elapsed since the API process imported this module."""

    return max(time.monotonic() - _STARTED_AT, 0.0)


def iso_timestamp(moment: datetime | None = None) -> str:
    """Render ``moment`` (default: now) as UTC ISO-8601 with milliseconds, e.g.
    ``2026-10-19T12:00:00.000Z``."""

    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def epoch_millis() -> int:
    return int(time.time() * 1000)
