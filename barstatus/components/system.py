"""Assorted system readings: files, time, disks, host and user details."""

from __future__ import annotations

import os
import pwd
import socket
import subprocess
import time
from pathlib import Path

from barstatus.util import fmt_human, read_int, warn

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

_BUF_SIZE = 1024
_LINE_LIMIT = _BUF_SIZE - 2


def _first_line(line: str) -> str | None:
    line = line.rstrip("\n") if line.endswith("\n") else line
    return line or None


def cat(path: str | Path) -> str | None:
    """First line of a file, or None if it is missing or empty."""
    try:
        with open(path) as handle:
            line = handle.readline(_LINE_LIMIT)
    except OSError:
        warn(f"fopen '{path}':")
        return None
    return _first_line(line)


def datetime(fmt: str) -> str | None:
    """Local time formatted with ``fmt``."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= _BUF_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def _statvfs(path: str | Path) -> os.statvfs_result | None:
    try:
        return os.statvfs(path)
    except OSError:
        warn(f"statvfs '{path}':")
        return None


def disk_free(path: str | Path) -> str | None:
    """Space available to unprivileged users."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str | Path) -> str | None:
    """Disk usage in percent."""
    fs = _statvfs(path)
    if fs is None or fs.f_blocks == 0:
        return None
    return str(int(100 * (1 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str | Path) -> str | None:
    """Total size of the file system."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str | Path) -> str | None:
    """Space in use on the file system."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)


def entropy(unused: object = None, path: str | Path = ENTROPY_AVAIL) -> str | None:
    """Available kernel entropy."""
    value = read_int(path)
    return None if value is None else str(value)


def hostname(unused: object = None) -> str | None:
    """Host name of this machine."""
    try:
        return socket.gethostname()
    except OSError:
        warn("gethostname:")
        return None


def kernel_release(unused: object = None) -> str | None:
    """Kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except OSError:
        warn("uname:")
        return None


def load_avg(unused: object = None) -> str | None:
    """One, five and fifteen minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def num_files(path: str | Path) -> str | None:
    """Number of entries in a directory."""
    try:
        count = len(os.listdir(path))
    except OSError:
        warn(f"opendir '{path}':")
        return None
    return str(count)


def run_command(cmd: str) -> str | None:
    """First line of a shell command's output, or None if it printed nothing."""
    try:
        with subprocess.Popen(cmd, shell=True, stdout=subprocess.PIPE, text=True) as proc:
            assert proc.stdout is not None
            line = proc.stdout.readline(_LINE_LIMIT)
    except OSError:
        warn(f"popen '{cmd}':")
        return None
    return _first_line(line)


def uptime(unused: object = None) -> str | None:
    """Time since boot as 'Hh Mm'."""
    clock = getattr(time, "CLOCK_BOOTTIME", None)
    if clock is None:
        clock = getattr(time, "CLOCK_UPTIME", time.CLOCK_MONOTONIC)
    try:
        seconds = int(time.clock_gettime(clock))
    except OSError:
        warn(f"clock_gettime {clock}")
        return None
    return f"{seconds // 3600}h {seconds % 3600 // 60}m"


def gid(unused: object = None) -> str:
    """Real group id of this process."""
    return str(os.getgid())


def uid(unused: object = None) -> str:
    """Effective user id of this process."""
    return str(os.geteuid())


def username(unused: object = None) -> str | None:
    """Name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': user entry not found")
        return None