"""CPU frequency and utilisation."""

from __future__ import annotations

from pathlib import Path

from barstatus.util import fmt_human, read_int, warn

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

_FIELDS = 7  # user nice system idle iowait irq softirq
_BUSY = (0, 1, 2, 5, 6)


class CpuUsage:
    """Utilisation between successive readings of a stat file."""

    def __init__(self, stat_path: str | Path = PROC_STAT) -> None:
        self.stat_path = Path(stat_path)
        self._last = [0.0] * _FIELDS

    def _read(self) -> list[float] | None:
        try:
            tokens = self.stat_path.read_text().split()
        except OSError:
            warn(f"fopen '{self.stat_path}':")
            return None
        try:
            return [float(token) for token in tokens[1 : 1 + _FIELDS]] if len(tokens) > _FIELDS else None
        except ValueError:
            return None

    def percent(self, unused: object = None) -> str | None:
        """Busy share in percent since the previous call, or None."""
        previous = self._last
        current = self._read()
        if current is None:
            return None
        self._last = current

        if previous[0] == 0:
            return None
        total = sum(previous) - sum(current)
        if total == 0:
            return None
        busy = sum(previous[i] for i in _BUSY) - sum(current[i] for i in _BUSY)
        return str(int(100 * busy / total))


_usage = CpuUsage()


def cpu_freq(unused: object = None, path: str | Path = CPU_FREQ) -> str | None:
    """Current frequency of the first CPU, scaled to Hz units."""
    freq_khz = read_int(path)
    if freq_khz is None:
        return None
    return fmt_human(freq_khz * 1000, 1000)


def cpu_perc(unused: object = None) -> str | None:
    """CPU utilisation from the system stat file."""
    return _usage.percent(unused)