"""Status line built from a list of component readings, refreshed on a timer."""

from __future__ import annotations

import os
import shutil
import signal
import subprocess
import sys
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from barstatus.components.network import netspeed_rx
from barstatus.components.power import battery_perc
from barstatus.components.system import datetime
from barstatus.util import warn

VERSION = "1.0"

# interval between updates, in milliseconds
INTERVAL_MS = 1000

# text shown when a component cannot produce a value
UNKNOWN_STR = "n/a"

# maximum length of the status line, terminator included
MAXLEN = 2048

USAGE = "usage: slstatus [-v] [-s] [-1]"


@dataclass(frozen=True)
class Arg:
    """One component of the status line: a reading, its format and argument."""

    func: Callable[[Any], str | None]
    fmt: str = "%s"
    args: Any = None


ARGS: list[Arg] = [
    Arg(battery_perc, "\U000f0079%s%%  ", "BAT0"),
    Arg(netspeed_rx, "%sB/s  ", "wlo1"),
    Arg(datetime, "%s", "%a %b %d %r"),
]


class _Die(Exception):
    """Fatal condition: the message is printed and the program exits with 1."""


def render(args: Sequence[Arg], unknown: str = UNKNOWN_STR) -> str:
    """Build the status line from ``args``.

    A component that yields None is shown as ``unknown``.  Rendering stops,
    with a warning, at the first piece that would not fit in MAXLEN.
    """
    parts: list[str] = []
    length = 0
    for arg in args:
        result = arg.func(arg.args)
        if result is None:
            result = unknown
        try:
            piece = arg.fmt % result
        except (TypeError, ValueError):
            warn("vsnprintf: invalid format")
            break
        size = len(piece.encode())
        if size >= MAXLEN - length:
            warn("vsnprintf: Output truncated")
            break
        parts.append(piece)
        length += size
    return "".join(parts)


def _parse_options(argv: Sequence[str]) -> tuple[bool, bool]:
    """Return (once, to_stdout) from the command line."""
    once = to_stdout = False
    rest = list(argv)
    while rest and rest[0].startswith("-") and len(rest[0]) > 1:
        option = rest.pop(0)
        if option == "--":
            break
        for flag in option[1:]:
            if flag == "v":
                raise _Die(f"slstatus-{VERSION}")
            if flag == "1":
                once = True
                to_stdout = True
            elif flag == "s":
                to_stdout = True
            else:
                raise _Die(USAGE)
    if rest:
        raise _Die(USAGE)
    return once, to_stdout


class _RootName:
    """Sets the name of the X root window, which status bars display."""

    def __init__(self) -> None:
        self._tool = shutil.which("xsetroot")
        if not os.environ.get("DISPLAY") or self._tool is None:
            raise _Die("XOpenDisplay: Failed to open display")

    def __call__(self, text: str) -> None:
        result = subprocess.run([self._tool, "-name", text], check=False)
        if result.returncode != 0:
            raise _Die("XStoreName: Allocation failed")

    def clear(self) -> None:
        subprocess.run([self._tool, "-name", ""], check=False)


def _print_line(text: str) -> None:
    try:
        print(text, flush=True)
    except OSError as error:
        raise _Die(f"puts: {error.strerror or error}") from error


def _run(once: bool, to_stdout: bool) -> None:
    done = threading.Event()
    wake = threading.Event()
    if once:
        done.set()

    def terminate(signum: int, frame: object) -> None:
        done.set()
        wake.set()

    def refresh(signum: int, frame: object) -> None:
        wake.set()

    previous = {
        signum: signal.signal(signum, handler)
        for signum, handler in (
            (signal.SIGINT, terminate),
            (signal.SIGTERM, terminate),
            (signal.SIGUSR1, refresh),
        )
    }
    try:
        root = None if to_stdout else _RootName()
        write = _print_line if root is None else root
        while True:
            start = time.monotonic()
            write(render(ARGS))
            if done.is_set():
                break
            remaining = INTERVAL_MS / 1000 - (time.monotonic() - start)
            if remaining >= 0:
                wake.wait(remaining)
                wake.clear()
            if done.is_set():
                break
        if root is not None:
            root.clear()
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the status loop; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        once, to_stdout = _parse_options(args)
        _run(once, to_stdout)
    except _Die as error:
        sys.stderr.write(f"{error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())