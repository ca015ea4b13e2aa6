import struct
from unittest import mock

from barstatus.components import audio


def _fake_ioctl(devmask, level):
    def ioctl(fd, request, arg):
        if request == audio.SOUND_MIXER_READ_DEVMASK:
            return struct.pack("i", devmask)
        if request == audio.mixer_read(0):
            return struct.pack("i", level)
        raise OSError(25, "Inappropriate ioctl for device")

    return ioctl


def test_missing_device(tmp_path):
    assert audio.vol_perc(tmp_path / "nomixer") is None


def test_regular_file_is_not_a_mixer(tmp_path):
    card = tmp_path / "mixer"
    card.write_bytes(b"")
    assert audio.vol_perc(card) is None


def test_reads_left_channel(tmp_path):
    card = tmp_path / "mixer"
    card.write_bytes(b"")
    level = (60 << 8) | 75
    with mock.patch("fcntl.ioctl", side_effect=_fake_ioctl(1, level)):
        assert audio.vol_perc(card) == "75"


def test_no_volume_channel(tmp_path):
    card = tmp_path / "mixer"
    card.write_bytes(b"")
    with mock.patch("fcntl.ioctl", side_effect=_fake_ioctl(1 << 4, 50)):
        assert audio.vol_perc(card) is None


def test_mixer_read_request_codes():
    assert audio.SOUND_MIXER_READ_DEVMASK == 0x80044DFE
    assert audio.mixer_read(0) == 0x80044D00
    assert audio.SOUND_DEVICE_NAMES[0] == "vol"