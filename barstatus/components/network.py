"""Network readings: interface addresses, traffic rates and wireless link."""

from __future__ import annotations

import array
import fcntl
import re
import socket
import struct
from pathlib import Path

import psutil

from barstatus.util import fmt_human, read_int, warn

NET_ROOT = "/sys/class/net"
PROC_WIRELESS = "/proc/net/wireless"
INTERVAL_MS = 1000

_SIOCGIWESSID = 0x8B1B
_IW_ESSID_MAX_SIZE = 32
_IFNAMSIZ = 16
_IWREQ_SIZE = 32

_QUALITY = re.compile(r"\s*[+-]?\d+\s+([+-]?\d+)")


def _ip(interface: str, family: int) -> str | None:
    try:
        addresses = psutil.net_if_addrs()
    except OSError:
        warn("getifaddrs:")
        return None
    for address in addresses.get(interface, ()):
        if address.family == family and address.address:
            return address.address
    return None


def ipv4(interface: str) -> str | None:
    """First IPv4 address of an interface."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """First IPv6 address of an interface."""
    return _ip(interface, socket.AF_INET6)


class ByteCounter:
    """Transfer rate of an interface between successive readings."""

    def __init__(
        self,
        direction: str,
        interval: int = INTERVAL_MS,
        root: str | Path = NET_ROOT,
    ) -> None:
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = Path(root)
        self._bytes = 0

    def speed(self, interface: str) -> str | None:
        """Bytes per second since the previous call, or None on the first."""
        previous = self._bytes
        path = self.root / interface / "statistics" / f"{self.direction}_bytes"
        current = read_int(path)
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None
        return fmt_human((current - previous) * 1000 // self.interval, 1024)


_rx = ByteCounter("rx")
_tx = ByteCounter("tx")


def netspeed_rx(interface: str) -> str | None:
    """Receive rate of an interface."""
    return _rx.speed(interface)


def netspeed_tx(interface: str) -> str | None:
    """Transmit rate of an interface."""
    return _tx.speed(interface)


def wifi_perc(
    interface: str,
    root: str | Path = NET_ROOT,
    wireless: str | Path = PROC_WIRELESS,
) -> str | None:
    """Link quality of a wireless interface in percent."""
    operstate = Path(root) / interface / "operstate"
    try:
        with open(operstate) as handle:
            status = handle.readline(4)
    except OSError:
        warn(f"fopen '{operstate}':")
        return None
    if status != "up\n":
        return None

    try:
        with open(wireless) as handle:
            lines = [handle.readline() for _ in range(3)]
    except OSError:
        warn(f"fopen '{wireless}':")
        return None
    line = lines[2]
    if not line:
        return None

    start = line.find(interface)
    if start < 0:
        return None
    match = _QUALITY.match(line[start + len(interface) + 2 :])
    if match is None:
        return None
    cur = int(match.group(1))
    # 70 is the largest quality value the kernel reports
    return str(int(cur / 70 * 100))


def wifi_essid(interface: str) -> str | None:
    """ESSID the wireless interface is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("snprintf: Output truncated")
        return None

    essid = array.array("B", bytes(_IW_ESSID_MAX_SIZE + 1))
    address, length = essid.buffer_info()
    request = struct.pack("16sPHH", name, address, length, 0).ljust(_IWREQ_SIZE, b"\0")

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError:
        warn("socket 'AF_INET':")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request)
        except OSError:
            warn("ioctl 'SIOCGIWESSID':")
            return None

    value = essid.tobytes().split(b"\0", 1)[0]
    if not value:
        return None
    return value.decode(errors="replace")