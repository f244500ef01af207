"""
System uptime from /proc/uptime.

Collects elapsed seconds since boot and renders them as e.g.
``1 day, 25 hours, 20 minutes``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sysfetch_core.errors import SourceReadError

logger = logging.getLogger(__name__)

DEFAULT_UPTIME_PATH = "/proc/uptime"


@dataclass(frozen=True)
class Uptime:
    """Uptime decomposed from a single seconds count."""

    seconds: int
    minutes: int
    hours: int
    days: int
    formatted: str


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def parse_uptime_seconds(content: str) -> int:
    """
    Extract whole elapsed seconds from /proc/uptime content.

    Anything unparseable yields 0 rather than an error, so a garbled
    counter never fails a gather.
    """
    tokens = content.split()
    whole = tokens[0].split(".")[0] if tokens else ""
    # Plain ASCII digits only; "1_000" and non-ASCII digits are garbage
    if not (whole.isascii() and whole.isdigit()):
        logger.warning(f"Unparseable uptime counter {content!r}, assuming 0 seconds")
        return 0
    return int(whole)


def format_uptime(total_seconds: int) -> Uptime:
    """
    Decompose a seconds count into days, hours and minutes.

    ``hours`` counts every hour since boot, not the hours left over
    after whole days, so 90000 seconds is 1 day and 25 hours.
    """
    days = total_seconds // 86400
    hours = total_seconds // 3600
    minutes = total_seconds % 3600 // 60

    parts = []
    if days > 0:
        parts.append(_plural(days, "day"))
    if hours > 0:
        parts.append(_plural(hours, "hour"))
    if minutes > 0:
        parts.append(_plural(minutes, "minute"))

    # Just powered on
    if not parts:
        formatted = _plural(total_seconds, "second")
    else:
        formatted = ", ".join(parts)

    return Uptime(
        seconds=total_seconds,
        minutes=minutes,
        hours=hours,
        days=days,
        formatted=formatted,
    )


def get_uptime(path: str = DEFAULT_UPTIME_PATH) -> Uptime:
    """
    Read the uptime counter and decompose it.

    Raises:
        SourceReadError: If the counter file cannot be read or is not UTF-8 text.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, str(e)) from e

    return format_uptime(parse_uptime_seconds(content))
