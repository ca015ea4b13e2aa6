"""Memory and swap usage read from a meminfo file."""

from __future__ import annotations

from pathlib import Path

from barstatus.util import fmt_human, warn

MEMINFO = "/proc/meminfo"

_RAM_FIELDS = ("MemTotal", "MemFree", "MemAvailable", "Buffers", "Cached")
_SWAP_FIELDS = ("SwapTotal", "SwapFree", "SwapCached")


def _read_lines(meminfo: str | Path) -> list[str] | None:
    try:
        return Path(meminfo).read_text().splitlines()
    except OSError:
        warn(f"fopen '{meminfo}':")
        return None


def _parse_kb(text: str) -> int | None:
    parts = text.split()
    if not parts:
        return None
    try:
        return int(parts[0])
    except ValueError:
        return None


def _scan_ram(meminfo: str | Path, count: int) -> list[int] | None:
    """Read the leading ``count`` meminfo fields, which must appear in order."""
    lines = _read_lines(meminfo)
    if lines is None or len(lines) < count:
        return None
    values = []
    for name, line in zip(_RAM_FIELDS[:count], lines):
        key, sep, rest = line.partition(":")
        if not sep or key.strip() != name:
            return None
        value = _parse_kb(rest)
        if value is None:
            return None
        values.append(value)
    return values


def _swap_info(meminfo: str | Path) -> dict[str, int] | None:
    lines = _read_lines(meminfo)
    if lines is None:
        return None
    found: dict[str, int] = {}
    for line in lines:
        if len(found) == len(_SWAP_FIELDS):
            break
        for name in _SWAP_FIELDS:
            if name not in found and line.startswith(name):
                value = _parse_kb(line[len(name) + 1 :])
                if value is not None:
                    found[name] = value
                break
    if len(found) != len(_SWAP_FIELDS):
        return None
    return found


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def ram_free(unused: object = None, meminfo: str | Path = MEMINFO) -> str | None:
    """Available memory."""
    values = _scan_ram(meminfo, 3)
    if values is None:
        return None
    return fmt_human(values[2] * 1024, 1024)


def ram_perc(unused: object = None, meminfo: str | Path = MEMINFO) -> str | None:
    """Memory in use, in percent, not counting buffers and cache."""
    values = _scan_ram(meminfo, 5)
    if values is None:
        return None
    total, free, _available, buffers, cached = values
    if total == 0:
        return None
    return str(_trunc_div(100 * ((total - free) - (buffers + cached)), total))


def ram_total(unused: object = None, meminfo: str | Path = MEMINFO) -> str | None:
    """Total memory."""
    values = _scan_ram(meminfo, 1)
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(unused: object = None, meminfo: str | Path = MEMINFO) -> str | None:
    """Memory in use, not counting buffers and cache."""
    values = _scan_ram(meminfo, 5)
    if values is None:
        return None
    total, free, _available, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(unused: object = None, meminfo: str | Path = MEMINFO) -> str | None:
    """Free swap space."""
    info = _swap_info(meminfo)
    if info is None:
        return None
    return fmt_human(info["SwapFree"] * 1024, 1024)


def swap_perc(unused: object = None, meminfo: str | Path = MEMINFO) -> str | None:
    """Swap in use, in percent."""
    info = _swap_info(meminfo)
    if info is None or info["SwapTotal"] == 0:
        return None
    total = info["SwapTotal"]
    used = total - info["SwapFree"] - info["SwapCached"]
    return str(_trunc_div(100 * used, total))


def swap_total(unused: object = None, meminfo: str | Path = MEMINFO) -> str | None:
    """Total swap space."""
    info = _swap_info(meminfo)
    if info is None:
        return None
    return fmt_human(info["SwapTotal"] * 1024, 1024)


def swap_used(unused: object = None, meminfo: str | Path = MEMINFO) -> str | None:
    """Swap space in use."""
    info = _swap_info(meminfo)
    if info is None:
        return None
    used = info["SwapTotal"] - info["SwapFree"] - info["SwapCached"]
    return fmt_human(used * 1024, 1024)