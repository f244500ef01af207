"""
Host identity: login name, host name and kernel release.
"""

from __future__ import annotations

import logging
import os
from enum import Enum

from sysfetch_core.errors import IdentityError

logger = logging.getLogger(__name__)


class IdentityKind(Enum):
    """Piece of host identity to query."""

    USERNAME = "username"
    HOSTNAME = "hostname"
    KERNEL_VERSION = "kernel_version"


def decode_fixed_buffer(raw: bytes) -> str:
    """
    Decode a fixed-length, NUL-padded identity field as text.

    Decoding stops at the first NUL byte; without one the whole buffer
    is used.

    Raises:
        IdentityError: If the bytes before the terminator are not valid UTF-8.
    """
    end = raw.find(b"\x00")
    if end != -1:
        raw = raw[:end]
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise IdentityError(f"Identity field is not valid text: {raw!r}") from e


def get_identity(kind: IdentityKind) -> str:
    """
    Query one identity value from the operating system.

    Args:
        kind: Which value to fetch.

    Returns:
        The login name, node name or kernel release.

    Raises:
        IdentityError: If the value cannot be obtained or is not valid text.
    """
    if kind is IdentityKind.USERNAME:
        try:
            name = os.getlogin()
        except OSError as e:
            raise IdentityError(f"Failed retrieving username: {e}") from e
        if not name:
            raise IdentityError("Failed retrieving username: no login name")
        return decode_fixed_buffer(os.fsencode(name))

    uname = os.uname()
    if kind is IdentityKind.HOSTNAME:
        field = uname.nodename
    elif kind is IdentityKind.KERNEL_VERSION:
        field = uname.release
    else:
        raise IdentityError(f"Unknown identity kind: {kind!r}")

    value = decode_fixed_buffer(os.fsencode(field))
    logger.debug(f"Resolved {kind.value}: {value}")
    return value
