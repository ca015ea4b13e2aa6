"""Status line assembled from the output of shell commands, each on its own schedule."""

from __future__ import annotations

import os
import shutil
import signal
import subprocess
import sys
import threading
from dataclasses import dataclass
from typing import Callable, Sequence

CMDLENGTH = 50
DELIM_LEN = 5


@dataclass(frozen=True)
class Block:
    """A command whose first output line, after ``icon``, is one part of the bar.

    ``interval`` is in seconds (0 means only at start-up); ``signal`` is the
    real-time signal offset that forces a refresh (0 means none).
    """

    icon: str
    command: str
    interval: int = 0
    signal: int = 0


BLOCKS: tuple[Block, ...] = (
    Block("<\x02  ", "updates", 120, 0),
    Block("\x03﬙  ", "upt", 10, 0),
    Block("\x04﨎  ", "weather", 1800, 0),
    Block("\x05  ", "cputemp", 1, 0),
    Block("\x06  ", "mem", 5, 0),
    Block("\x07  ", "xkb-switch", 1, 10),
    Block("\x08  ", "pamixer --get-volume-human", 1, 0),
    Block("\x09  ", "clock", 5, 0),
)

DELIM = "<"


def run_block(block: Block, delim: str) -> str:
    """Run the block's command and return its icon, first output line and delimiter."""
    icon = block.icon.encode()
    limit = max(0, CMDLENGTH - len(icon) - (len(delim) + 1) - 1)
    try:
        with subprocess.Popen(block.command, shell=True, stdout=subprocess.PIPE) as proc:
            assert proc.stdout is not None
            line = proc.stdout.readline(limit) if limit else b""
    except OSError:
        return block.icon

    output = (icon + line).decode(errors="ignore")
    if not output:
        return ""
    if output.endswith("\n"):
        output = output[:-1]
    return output + delim


class StatusBar:
    """Holds the latest output of every block and joins them into one line."""

    def __init__(self, blocks: Sequence[Block], delim: str) -> None:
        self.blocks = tuple(blocks)
        self.delim = delim
        self.outputs = [""] * len(self.blocks)

    def update(self, time: int) -> None:
        """Refresh blocks due at second ``time``; -1 refreshes all."""
        for index, block in enumerate(self.blocks):
            if time == -1 or (block.interval != 0 and time % block.interval == 0):
                self.outputs[index] = run_block(block, self.delim)

    def update_signal(self, signal: int) -> None:
        """Refresh the blocks bound to ``signal``."""
        for index, block in enumerate(self.blocks):
            if block.signal == signal:
                self.outputs[index] = run_block(block, self.delim)

    def status(self) -> str:
        """All outputs joined, without the trailing delimiter."""
        text = "".join(self.outputs)
        if self.delim:
            text = text[: max(0, len(text) - len(self.delim))]
        return text


class _RootName:
    """Sets the name of the X root window."""

    def __init__(self) -> None:
        self._tool = shutil.which("xsetroot")
        if not os.environ.get("DISPLAY") or self._tool is None:
            raise OSError("dwmblocks: Failed to open display")

    def __call__(self, text: str) -> None:
        subprocess.run([self._tool, "-name", text], check=False)


def _print_line(text: str) -> None:
    print(text, flush=True)


def _realtime_range() -> range:
    low = getattr(signal, "SIGRTMIN", None)
    high = getattr(signal, "SIGRTMAX", None)
    if low is None or high is None:
        return range(0)
    return range(int(low), int(high) + 1)


def _run(bar: StatusBar, write: Callable[[str], None]) -> None:
    stop = threading.Event()
    last = ""

    def emit() -> None:
        nonlocal last
        text = bar.status()
        if text != last:
            last = text
            write(text)

    def on_block_signal(signum: int, frame: object) -> None:
        bar.update_signal(signum - int(signal.SIGRTMIN))
        emit()

    def on_terminate(signum: int, frame: object) -> None:
        stop.set()

    previous: dict[int, object] = {}

    def install(signum: int, handler: Callable[[int, object], None]) -> None:
        try:
            old = signal.signal(signum, handler)
        except (OSError, ValueError):
            return
        previous.setdefault(signum, old)

    realtime = _realtime_range()
    for signum in realtime:
        install(signum, lambda s, f: None)
    if realtime:
        base = int(signal.SIGRTMIN)
        for block in bar.blocks:
            if block.signal > 0:
                install(base + block.signal, on_block_signal)
    install(signal.SIGTERM, on_terminate)
    install(signal.SIGINT, on_terminate)

    try:
        bar.update(-1)
        tick = 0
        while True:
            bar.update(tick)
            tick += 1
            emit()
            if stop.is_set():
                break
            stop.wait(1.0)
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the block status bar; return the process exit status."""
    args = iter(sys.argv[1:] if argv is None else argv)
    delim = DELIM
    to_stdout = False
    for arg in args:
        if arg == "-d":
            try:
                delim = next(args)[:DELIM_LEN]
            except StopIteration:
                sys.stderr.write("dwmblocks: option -d requires an argument\n")
                return 1
        elif arg == "-p":
            to_stdout = True

    if to_stdout:
        write: Callable[[str], None] = _print_line
    else:
        try:
            write = _RootName()
        except OSError as error:
            sys.stderr.write(f"{error}\n")
            return 1

    delim = delim[: min(DELIM_LEN, len(delim))]
    _run(StatusBar(BLOCKS, delim), write)
    return 0


if __name__ == "__main__":
    sys.exit(main())