import pytest

from barstatus.components.memory import (
    ram_free,
    ram_perc,
    ram_total,
    ram_used,
    swap_free,
    swap_perc,
    swap_total,
    swap_used,
)
from barstatus.util import fmt_human

MEMINFO = (
    "MemTotal:       16000000 kB\n"
    "MemFree:         4000000 kB\n"
    "MemAvailable:    8000000 kB\n"
    "Buffers:         1000000 kB\n"
    "Cached:          3000000 kB\n"
    "SwapCached:            0 kB\n"
    "Active:          5000000 kB\n"
    "SwapTotal:       2048000 kB\n"
    "SwapFree:        1024000 kB\n"
)


@pytest.fixture
def meminfo(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO)
    return path


def test_ram_total(meminfo):
    assert ram_total(None, meminfo) == fmt_human(16000000 * 1024, 1024)


def test_ram_free_uses_available(meminfo):
    assert ram_free(None, meminfo) == fmt_human(8000000 * 1024, 1024)


def test_ram_used_excludes_buffers_and_cache(meminfo):
    assert ram_used(None, meminfo) == fmt_human(8000000 * 1024, 1024)


def test_ram_perc(meminfo):
    assert ram_perc(None, meminfo) == "50"


def test_ram_perc_zero_total(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO.replace("16000000", "0"))
    assert ram_perc(None, path) is None


def test_ram_fields_out_of_order(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemFree: 1 kB\nMemTotal: 2 kB\nMemAvailable: 3 kB\n")
    assert ram_total(None, path) is None
    assert ram_free(None, path) is None


def test_ram_missing_file(tmp_path):
    missing = tmp_path / "absent"
    assert ram_total(None, missing) is None
    assert ram_perc(None, missing) is None
    assert ram_used(None, missing) is None


def test_swap_total(meminfo):
    assert swap_total(None, meminfo) == fmt_human(2048000 * 1024, 1024)


def test_swap_free(meminfo):
    assert swap_free(None, meminfo) == fmt_human(1024000 * 1024, 1024)


def test_swap_used_equals_free_when_half(meminfo):
    assert swap_used(None, meminfo) == swap_free(None, meminfo)


def test_swap_perc(meminfo):
    assert swap_perc(None, meminfo) == "50"


def test_swap_perc_zero_total(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("SwapCached: 0 kB\nSwapTotal: 0 kB\nSwapFree: 0 kB\n")
    assert swap_perc(None, path) is None
    assert swap_total(None, path) == fmt_human(0, 1024)


def test_swap_missing_field(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("SwapTotal: 10 kB\nSwapFree: 5 kB\n")
    assert swap_used(None, path) is None


def test_swap_missing_file(tmp_path):
    assert swap_free(None, tmp_path / "absent") is None