"""
Parsers for the line-oriented text files under /etc and /proc.

Both parsers return None for a missing key; callers decide whether
that is fatal.
"""

from __future__ import annotations


def parse_release_key(text: str, key: str) -> str | None:
    """
    Return the value of ``KEY=`` from os-release style text.

    Only the first line starting with ``KEY=`` is considered, so ``ID``
    does not pick up ``VERSION_ID`` or ``BUILD_ID``. Every double-quote
    character is dropped from the value, not just surrounding ones.

    Args:
        text: Contents of an os-release file.
        key: Key to look up, e.g. "NAME".

    Returns:
        The unquoted value, or None if the key is absent or empty.
    """
    prefix = f"{key}="
    for line in text.splitlines():
        if line.startswith(prefix):
            value = line[len(prefix):].replace('"', "")
            return value or None
    return None


def parse_stat_key(text: str, key: str) -> str | None:
    """
    Return the numeric column of the first line starting with ``key``.

    ``"MemTotal:       16384000 kB"`` yields ``"16384000"``; the unit
    suffix is discarded.
    """
    for line in text.splitlines():
        if line.startswith(key):
            tokens = line.split()
            if len(tokens) < 2:
                return None
            return tokens[1]
    return None
