"""Shared helpers: human-readable sizes, warnings and small file readers."""

from __future__ import annotations

import re
import sys
from pathlib import Path

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def warn(message: str) -> None:
    """Write a warning line to stderr.

    A message ending in ':' is followed by the exception currently being
    handled, if there is one.
    """
    error = sys.exc_info()[1]
    if message.endswith(":") and error is not None:
        detail = getattr(error, "strerror", None) or str(error)
        sys.stderr.write(f"{message} {detail}\n")
    else:
        sys.stderr.write(f"{message}\n")


def fmt_human(num: float, base: int) -> str:
    """Scale ``num`` by ``base`` (1000 or 1024) and add the unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def _read_text(path: str | Path) -> str | None:
    try:
        return Path(path).read_text()
    except OSError:
        warn(f"fopen '{path}':")
        return None


def read_first_line(path: str | Path) -> str | None:
    """Return the first line of a file without its newline, or None."""
    text = _read_text(path)
    if text is None:
        return None
    return text.split("\n", 1)[0]


def read_int(path: str | Path) -> int | None:
    """Return the integer at the start of a file, or None."""
    text = _read_text(path)
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None