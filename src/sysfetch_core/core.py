"""
Core gathering module for Sysfetch Core.

Reads every source, parses and formats the values, and assembles them
into a single SystemInfo record. Any missing or malformed field aborts
the whole gather.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass
from typing import Any

from sysfetch_core.config import Config
from sysfetch_core.errors import (
    ConversionError,
    MissingFieldError,
    SourceReadError,
    SysfetchError,
)
from sysfetch_core.identity import IdentityKind, get_identity
from sysfetch_core.parsers import parse_release_key, parse_stat_key
from sysfetch_core.units import kb_to_gb
from sysfetch_core.uptime import Uptime, get_uptime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SystemInfo:
    """Snapshot of host information, fully populated or not at all."""

    distro_name: str
    distro_id: str
    distro_build_id: str
    username: str
    hostname: str
    shell: str
    kernel: str
    uptime_seconds: int
    uptime_minutes: int
    uptime_hours: int
    uptime_days: int
    uptime_formatted: str
    total_mem: str
    cached_mem: str
    available_mem: str
    used_mem: str

    def to_dict(self) -> dict[str, Any]:
        """Convert record to dictionary for serialization."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Serialize record to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


def read_source(path: str) -> str:
    """
    Read a whole OS source file.

    Raises:
        SourceReadError: If the file cannot be opened or decoded.
    """
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, str(e)) from e


def _release_value(os_release: str, key: str) -> str:
    value = parse_release_key(os_release, key)
    if value is None:
        raise MissingFieldError(key, "os-release")
    return value


def _memory_kb(meminfo: str, key: str) -> float:
    raw = parse_stat_key(meminfo, key)
    if raw is None:
        raise MissingFieldError(key, "meminfo")
    try:
        value = float(raw)
    except ValueError as e:
        raise ConversionError(f"Invalid {key} value in meminfo: {raw!r}") from e
    if math.isnan(value) or math.isinf(value):
        raise ConversionError(f"Invalid {key} value in meminfo: {raw!r}")
    return value


def shell_name(shell_path: str | None) -> str:
    """Return the executable name of a shell path, e.g. ``/bin/zsh`` -> ``zsh``."""
    if not shell_path:
        raise MissingFieldError("SHELL", "environment")
    name = shell_path.rsplit("/", 1)[-1]
    if not name:
        raise MissingFieldError("SHELL", "environment")
    return name


def used_memory_kb(total_kb: float, available_kb: float) -> float:
    """
    Return memory in use as total minus available.

    Raises:
        ConversionError: If available exceeds total.
    """
    used = total_kb - available_kb
    if used < 0:
        raise ConversionError(
            f"MemAvailable ({available_kb:g} kB) exceeds MemTotal ({total_kb:g} kB)"
        )
    return used


def gather_from_text(
    os_release: str,
    meminfo: str,
    uptime: Uptime,
    shell_path: str | None,
) -> SystemInfo:
    """
    Build a SystemInfo from already-read source text.

    Identity values are still queried from the running system.

    Args:
        os_release: Contents of the os-release file.
        meminfo: Contents of /proc/meminfo.
        uptime: Decomposed uptime.
        shell_path: Path of the active shell executable.

    Returns:
        The complete record.

    Raises:
        SysfetchError: On the first field that cannot be obtained.
    """
    distro_name = _release_value(os_release, "NAME")
    distro_id = _release_value(os_release, "ID")
    distro_build_id = _release_value(os_release, "BUILD_ID")

    username = get_identity(IdentityKind.USERNAME)
    hostname = get_identity(IdentityKind.HOSTNAME)
    shell = shell_name(shell_path)
    kernel = get_identity(IdentityKind.KERNEL_VERSION)

    total_kb = _memory_kb(meminfo, "MemTotal")
    cached_kb = _memory_kb(meminfo, "Cached")
    available_kb = _memory_kb(meminfo, "MemAvailable")
    used_kb = used_memory_kb(total_kb, available_kb)

    return SystemInfo(
        distro_name=distro_name,
        distro_id=distro_id,
        distro_build_id=distro_build_id,
        username=username,
        hostname=hostname,
        shell=shell,
        kernel=kernel,
        uptime_seconds=uptime.seconds,
        uptime_minutes=uptime.minutes,
        uptime_hours=uptime.hours,
        uptime_days=uptime.days,
        uptime_formatted=uptime.formatted,
        total_mem=kb_to_gb(total_kb),
        cached_mem=kb_to_gb(cached_kb),
        available_mem=kb_to_gb(available_kb),
        used_mem=kb_to_gb(used_kb),
    )


def get_system_information(config: Config | None = None) -> SystemInfo:
    """
    Gather a full snapshot of host information.

    Args:
        config: Source paths and shell path. Resolved with Config.load()
            (which reads $SHELL) if not provided.

    Returns:
        The complete SystemInfo record.

    Raises:
        SysfetchError: If any field cannot be read, parsed or converted.
    """
    config = config or Config.load()

    logger.debug(f"Reading {config.os_release_path} and {config.meminfo_path}")
    try:
        os_release = read_source(config.os_release_path)
        meminfo = read_source(config.meminfo_path)
        uptime = get_uptime(config.uptime_path)
        info = gather_from_text(os_release, meminfo, uptime, config.shell_path)
    except SysfetchError as e:
        logger.error(f"System information gather failed: {e}")
        raise

    logger.debug(f"Gathered system information for {info.hostname}")
    return info
