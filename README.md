# barstatus

`barstatus` builds the one-line status text shown by minimal window
managers. It offers two commands:

- **`barstatus`** evaluates a fixed list of small system probes once per
  second and joins their formatted results into a single line.
- **`barstatus-blocks`** runs a list of shell commands ("blocks"), each on
  its own update interval or on demand through a signal, and joins their
  output with a delimiter.

Both commands either print the line on standard output or set it as the
name of the X root window, which is where status bars read it from.

## Installation

```console
pip install .
```

The package needs Python 3.10 or later and depends on `psutil`.

## The `barstatus` command

```console
barstatus -s        # print a new status line on standard output every second
barstatus -1        # print the status line once on standard output and exit
barstatus -v        # write the version to standard error and exit with status 1
barstatus           # set the X root window name every second
```

Without `-s` or `-1`, the `DISPLAY` environment variable must be set and
the `xsetroot` program must be on `PATH`; the line is stored with
`xsetroot -name`, and cleared again when the loop ends. Any other option
or argument prints a usage message and exits with status 1.

The line is built from `barstatus.status.ARGS`: the battery percentage of
`BAT0`, the receive rate of interface `wlo1` and the local date and time.
A probe that cannot produce a value shows `n/a` in its place, so one
missing sensor never breaks the whole line. Sending `SIGINT` or `SIGTERM`
stops the loop; `SIGUSR1` wakes it for an immediate refresh.

### Probes

The probes live in `barstatus.components` and can be used on their own.
Each returns a string, or `None` when the value is not available (a
warning is then written to standard error).

| Module | Functions |
| --- | --- |
| `barstatus.components.power` | `battery_perc`, `battery_state`, `battery_remaining`, `temp` |
| `barstatus.components.cpu` | `cpu_freq`, `cpu_perc`, `CpuUsage` |
| `barstatus.components.memory` | `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used` |
| `barstatus.components.system` | `cat`, `datetime`, `disk_free`, `disk_perc`, `disk_total`, `disk_used`, `entropy`, `hostname`, `kernel_release`, `load_avg`, `num_files`, `run_command`, `uptime`, `gid`, `uid`, `username` |
| `barstatus.components.network` | `ipv4`, `ipv6`, `netspeed_rx`, `netspeed_tx`, `wifi_perc`, `wifi_essid`, `ByteCounter` |
| `barstatus.components.audio` | `vol_perc` |

Probes that measure a rate (`cpu_perc`, `netspeed_rx`, `netspeed_tx`)
return `None` on their first call and a value from the second call on.
`CpuUsage` and `ByteCounter` hold that state and can be created with
other file locations; the file-reading probes likewise take optional path
arguments, which makes them easy to point at test data.

```python
from barstatus.components.memory import ram_perc
from barstatus.components.power import battery_state

print(ram_perc())            # e.g. "37"
print(battery_state("BAT0")) # "+", "-", "o" or "?"
```

Sizes are shown with binary or decimal prefixes through
`barstatus.util.fmt_human`; for example `fmt_human(1536, 1024)` gives
`"1.5 Ki"`. Any base other than 1000 or 1024 raises `ValueError`.

A status line is a sequence of `barstatus.status.Arg` entries, each
pairing a probe with a printf-style format and the probe's argument, and
`barstatus.status.render` turns such a sequence into the final text:

```python
from barstatus.components.system import datetime, load_avg
from barstatus.status import Arg, render

line = render([Arg(load_avg, "load %s | "), Arg(datetime, "%s", "%H:%M")])
```

## The `barstatus-blocks` command

```console
barstatus-blocks -p           # write the status line to standard output
barstatus-blocks -p -d " | "  # use " | " between blocks
barstatus-blocks              # set the X root window name (needs DISPLAY and xsetroot)
```

The delimiter given with `-d` is cut to at most five characters; the
default is `<`.

Each `barstatus.blocks.Block` has an icon, a shell command, an update
interval in seconds (0 means only at start-up) and an update signal
(0 means none). A block with signal *n* is refreshed when the process
receives real-time signal `SIGRTMIN + n`, for example:

```console
pkill -RTMIN+10 -f barstatus-blocks
```

Only the first line of each command's output is used, cut so that a block
stays within 50 bytes, and a new line is written only when the combined
text has changed. `SIGINT` or `SIGTERM` stops the loop.

The commands run by default are listed in `barstatus.blocks.BLOCKS`
(`updates`, `upt`, `weather`, `cputemp`, `mem`, `xkb-switch`,
`pamixer --get-volume-human`, `clock`); most are personal scripts that
must exist on `PATH` for their block to show anything.
`barstatus.blocks.StatusBar` holds the blocks and their latest output, and
`barstatus.blocks.run_block` runs a single block.

## What the package does not do

- It does not talk to the X server itself: the root window name is set by
  running `xsetroot`, so the X output works only where that program is
  installed.
- There are no keyboard probes (caps/num lock indicators or the current
  keymap layout).
- The probes read Linux interfaces (`/proc`, `/sys`, Linux wireless
  ioctls, the OSS mixer device); other systems are not supported.
- The lists of probes and blocks are fixed in `barstatus.status.ARGS` and
  `barstatus.blocks.BLOCKS`; there is no configuration file.

## Running the tests

```console
pip install ".[test]"
pytest
```