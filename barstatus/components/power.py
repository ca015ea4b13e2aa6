"""Battery and temperature readings from sysfs."""

from __future__ import annotations

import os
import re
from pathlib import Path

from barstatus.util import read_int, warn

POWER_SUPPLY_ROOT = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

_STATE = re.compile(r"[a-zA-Z ]{1,12}")


def _read_state(bat: str, root: str | Path) -> str | None:
    path = Path(root) / bat / "status"
    try:
        text = path.read_text()
    except OSError:
        warn(f"fopen '{path}':")
        return None
    match = _STATE.match(text)
    return match.group(0) if match else None


def _pick(bat: str, root: str | Path, first: str, second: str) -> Path | None:
    for name in (first, second):
        path = Path(root) / bat / name
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str, root: str | Path = POWER_SUPPLY_ROOT) -> str | None:
    """Battery capacity in percent."""
    capacity = read_int(Path(root) / bat / "capacity")
    return None if capacity is None else str(capacity)


def battery_state(bat: str, root: str | Path = POWER_SUPPLY_ROOT) -> str | None:
    """Charging state as '+', '-', 'o' or '?'."""
    state = _read_state(bat, root)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str, root: str | Path = POWER_SUPPLY_ROOT) -> str | None:
    """Time left while discharging as 'Hh Mm'; empty when not discharging."""
    state = _read_state(bat, root)
    if state is None:
        return None

    charge_path = _pick(bat, root, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_int(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(bat, root, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_int(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"


def temp(file: str | Path) -> str | None:
    """Temperature in degrees Celsius from a millidegree sensor file."""
    value = read_int(file)
    return None if value is None else str(value // 1000)