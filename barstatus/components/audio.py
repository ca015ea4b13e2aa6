"""Master volume from an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct
from pathlib import Path

from barstatus.util import warn

DEFAULT_MIXER = "/dev/mixer"

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic", "cd",
    "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2", "line3",
    "dig1", "dig2", "dig3", "phin", "phout", "video", "radio", "monitor",
)

_IOC_READ = 2
_SOUND_MIXER_DEVMASK = 0xFE


def mixer_read(channel: int) -> int:
    """Request code that reads an int-sized mixer value for ``channel``."""
    size = struct.calcsize("i")
    return (_IOC_READ << 30) | (size << 16) | (ord("M") << 8) | channel


SOUND_MIXER_READ_DEVMASK = mixer_read(_SOUND_MIXER_DEVMASK)


def _read_int(fd: int, request: int) -> int:
    result = fcntl.ioctl(fd, request, struct.pack("i", 0))
    return struct.unpack("i", result)[0]


def vol_perc(card: str | Path = DEFAULT_MIXER) -> str | None:
    """Left-channel master volume in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError:
        warn(f"open '{card}':")
        return None

    try:
        try:
            devmask = _read_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError:
            warn("ioctl 'SOUND_MIXER_READ_DEVMASK':")
            return None

        value = None
        for channel, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << channel) and name == "vol":
                try:
                    value = _read_int(fd, mixer_read(channel))
                except OSError:
                    warn(f"ioctl 'MIXER_READ({channel})':")
                    return None
    finally:
        os.close(fd)

    if value is None:
        return None
    return str(value & 0xFF)