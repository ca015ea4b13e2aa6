import pytest

from barstatus.util import fmt_human, read_first_line, read_int, warn


def test_fmt_human_zero():
    assert fmt_human(0, 1000) == "0.0 "


def test_fmt_human_binary_kilo():
    assert fmt_human(1024, 1024) == "1.0 Ki"


def test_fmt_human_fraction():
    assert fmt_human(1536 * 1024**2, 1024) == "1.5 Gi"


def test_fmt_human_invalid_base():
    with pytest.raises(ValueError):
        fmt_human(10, 1010)


@pytest.mark.parametrize(
    "base,power,prefix",
    [
        (1000, 1, "k"),
        (1000, 2, "M"),
        (1000, 3, "G"),
        (1024, 2, "Mi"),
        (1024, 4, "Ti"),
    ],
)
def test_fmt_human_prefixes(base, power, prefix):
    value, unit = fmt_human(base**power, base).split(" ")
    assert unit == prefix
    assert float(value) == pytest.approx(1.0)


@pytest.mark.parametrize("num", [1, 999, 123456, 987654321, 10**15])
@pytest.mark.parametrize("base", [1000, 1024])
def test_fmt_human_scaled_below_base(num, base):
    value, _ = fmt_human(num, base).split(" ")
    assert 0 <= float(value) < base


def test_read_int(tmp_path):
    path = tmp_path / "n"
    path.write_text("42\n")
    assert read_int(path) == 42


def test_read_int_signed_with_suffix(tmp_path):
    path = tmp_path / "n"
    path.write_text("  -7 kB\n")
    assert read_int(path) == -7


def test_read_int_garbage(tmp_path):
    path = tmp_path / "n"
    path.write_text("abc\n")
    assert read_int(path) is None


def test_read_int_missing_warns(tmp_path, capsys):
    path = tmp_path / "absent"
    assert read_int(path) is None
    assert str(path) in capsys.readouterr().err


def test_read_first_line(tmp_path):
    path = tmp_path / "f"
    path.write_text("Charging\nmore\n")
    assert read_first_line(path) == "Charging"


def test_read_first_line_missing(tmp_path):
    assert read_first_line(tmp_path / "absent") is None


def test_warn_with_active_error(capsys):
    try:
        raise OSError("boom")
    except OSError:
        warn("open 'x':")
    assert capsys.readouterr().err == "open 'x': boom\n"


def test_warn_plain(capsys):
    warn("hello")
    assert capsys.readouterr().err == "hello\n"