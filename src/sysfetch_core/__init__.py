"""
Sysfetch Core - Host information gathering for system-fetch tools on Linux.

Reads distribution metadata, identity, kernel, shell, uptime and memory
statistics and returns them as a single immutable record.
"""

__version__ = "0.1.0"
__author__ = "Sysfetch"

from sysfetch_core.core import SystemInfo, get_system_information  # noqa: E402
from sysfetch_core.errors import SysfetchError  # noqa: E402

__all__ = ["__version__", "SystemInfo", "SysfetchError", "get_system_information"]
