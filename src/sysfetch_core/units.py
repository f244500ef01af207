"""Byte-unit formatting for memory statistics."""

from __future__ import annotations

import math

from sysfetch_core.errors import ConversionError

# /proc/meminfo reports "kB" which the kernel means as KiB
KIB = 1024.0
UNITS = ["B", "KB", "MB", "GB", "TB"]


def kb_to_gb(value: float) -> str:
    """
    Format a kibibyte quantity as a human-readable size.

    The unit is picked automatically on a 1024 base, so despite the name
    small values come back in MB or B and huge ones in TB or PB.

    Examples:
        >>> kb_to_gb(0)
        '0 B'
        >>> kb_to_gb(1048576)
        '1.00 GB'
        >>> kb_to_gb(4110000)
        '3.92 GB'

    Raises:
        ConversionError: If value is negative or not a finite number.
    """
    if math.isnan(value) or math.isinf(value):
        raise ConversionError(f"Cannot convert non-finite value: {value}")
    if value < 0:
        raise ConversionError(f"Cannot convert negative value: {value}")

    size = value * KIB
    for unit in UNITS:
        # Anything that would display as 1024.00 belongs to the next unit
        if round(size, 2) < KIB:
            if unit == "B":
                return f"{int(size)} {unit}"
            return f"{size:.2f} {unit}"
        size /= KIB
    return f"{size:.2f} PB"
