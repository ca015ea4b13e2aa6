import os
import platform
import pwd
import re
import socket
import time

from barstatus.components import system

_HUMAN = re.compile(r"^\d+\.\d (|Ki|Mi|Gi|Ti|Pi|Ei|Zi|Yi)$")


def test_cat_first_line(tmp_path):
    path = tmp_path / "f"
    path.write_text("hello\nworld\n")
    assert system.cat(path) == "hello"


def test_cat_without_newline(tmp_path):
    path = tmp_path / "f"
    path.write_text("single")
    assert system.cat(path) == "single"


def test_cat_empty_and_missing(tmp_path):
    path = tmp_path / "f"
    path.write_text("")
    assert system.cat(path) is None
    assert system.cat(tmp_path / "absent") is None


def test_cat_blank_line_is_none(tmp_path):
    path = tmp_path / "f"
    path.write_text("\nmore\n")
    assert system.cat(path) is None


def test_cat_truncates_long_line(tmp_path):
    path = tmp_path / "f"
    path.write_text("x" * 5000)
    result = system.cat(path)
    assert result == "x" * 1022


def test_datetime_matches_strftime():
    assert system.datetime("%Y") == time.strftime("%Y")


def test_datetime_empty_result():
    assert system.datetime("") is None


def test_disk_values(tmp_path):
    perc = int(system.disk_perc(tmp_path))
    assert 0 <= perc <= 100
    for func in (system.disk_free, system.disk_total, system.disk_used):
        assert _HUMAN.match(func(tmp_path))


def test_disk_missing_path(tmp_path):
    missing = tmp_path / "absent"
    assert system.disk_free(missing) is None
    assert system.disk_perc(missing) is None
    assert system.disk_total(missing) is None
    assert system.disk_used(missing) is None


def test_entropy_from_file(tmp_path):
    path = tmp_path / "entropy_avail"
    path.write_text("256\n")
    assert system.entropy(None, path) == "256"
    assert system.entropy(None, tmp_path / "absent") is None


def test_hostname():
    assert system.hostname() == socket.gethostname()


def test_kernel_release():
    assert system.kernel_release() == platform.release()


def test_load_avg_format():
    result = system.load_avg()
    parts = result.split(" ")
    assert len(parts) == 3
    for part in parts:
        whole, _, fraction = part.partition(".")
        assert whole.isdigit()
        assert len(fraction) == 2
        assert fraction.isdigit()
        assert float(part) >= 0.0


def test_num_files(tmp_path):
    for name in ("a", "b", ".hidden"):
        (tmp_path / name).write_text("")
    assert system.num_files(tmp_path) == "3"
    assert system.num_files(tmp_path / "absent") is None


def test_run_command_first_line():
    assert system.run_command("echo foo") == "foo"
    assert system.run_command("printf 'a\\nb\\n'") == "a"


def test_run_command_no_output():
    assert system.run_command("true") is None


def test_uptime_format():
    result = system.uptime()
    parts = result.split(" ")
    assert len(parts) == 2
    hours, minutes = parts
    assert hours[-1] == "h"
    assert minutes[-1] == "m"
    assert int(hours[:-1]) >= 0
    assert 0 <= int(minutes[:-1]) < 60


def test_user_ids():
    assert system.uid() == str(os.geteuid())
    assert system.gid() == str(os.getgid())


def test_username():
    assert system.username() == pwd.getpwuid(os.geteuid()).pw_name


def test_username_unknown(monkeypatch):
    def missing(uid):
        raise KeyError(uid)

    monkeypatch.setattr(pwd, "getpwuid", missing)
    assert system.username() is None