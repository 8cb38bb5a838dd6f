# jyggalog

jyggalog is a small logging library that keeps its output plain and ordered. Each call writes one line:

```
[time-date|LEVEL|file: line]: message;
```

The style bits that are set decide which parts of the line appear.

## Installation

```
pip install jyggalog
```

The package has no runtime dependencies. To install what the tests need, use `pip install jyggalog[test]`.

## Levels

`jyggalog.logger.Level` is an `IntEnum`. From lowest to highest its members are `ALL`, `DEBUG`, `INFO`, `WARN`, `ERROR`, `FATAL` and `NONE`.

- A logger writes a message only when its level is at or above the logger's threshold. The default threshold is `INFO`.
- `ALL` and `NONE` work only as thresholds. Logging a message at either level raises `ValueError`.
- A `FATAL` message sent through `log`/`jlog` is written first. The fatal hook then runs, if one is set, and `SystemExit(1)` is raised.
- A `FATAL` message sent through `logf`/`jlogf` raises `SystemExit(1)` at once. Nothing is written and the hook does not run.

## Styles

`jyggalog.logger.Style` is an `IntFlag`. Combine its members with `|`:

| Flag          | Adds                                       |
|---------------|--------------------------------------------|
| `DEFAULT`     | level and message only                     |
| `LINE_NUMBER` | the caller's line number                   |
| `FILE_NAME`   | the caller's file name                     |
| `TIME`        | local time, `HH:MM:SS`                     |
| `DATE`        | local date, `DD/MM/YYYY`                   |
| `COLORS`      | ANSI colour codes around the level name    |

With both `TIME` and `DATE` set, the stamp is `HH:MM:SS-DD/MM/YYYY`. With both `FILE_NAME` and `LINE_NUMBER` set, the location is `file: line`.

Plain messages end in `;` followed by a newline. Formatted messages end in a newline only. Every line is cut to at most 511 characters (`MAX_MSG_LENGTH` is 512).

## Usage

The module-level functions share one default logger. They fill in the caller's file name and line number:

```python
from jyggalog.logger import (
    Level, Style, set_level, set_style, set_fatal_hook, log, logf, info, warn,
)

set_style(Style.COLORS | Style.FILE_NAME | Style.LINE_NUMBER)
set_fatal_hook(lambda: print("Bye bye!"))

log(Level.DEBUG, "It's debuggin' time")   # dropped: the default threshold is INFO
info("I'm info")
warn("I'm a warn")

set_level(Level.WARN)
logf(Level.ERROR, "failed %d times", 3)   # printf-style, using the % operator
```

The shared logger also has `debug`, `error` and `fatal`, plus `jlog` and `jlogf`, which take an explicit file name, line number and stream.

By default every call writes to standard output. To write elsewhere, pass `stream=` with another text stream. Each logging call returns the number of characters written, or `0` when the message falls below the threshold.

You can also create a logger of your own:

```python
import sys
from jyggalog.logger import Logger, Level, Style

logger = Logger(level=Level.DEBUG, style=Style.TIME | Style.DATE)
logger.log(Level.INFO, "started", stream=sys.stderr)
logger.logf(Level.WARN, "%d retries left", 2)
logger.jlog(Level.WARN, "worker.py", 42, sys.stdout, "slow response")
```

`Logger.format(level, message, file_name="", line_number=0, when=None)` returns the line that `jlog` would write, without writing it. If you pass a `datetime` as `when`, it is used in place of the current time:

```python
from datetime import datetime
from jyggalog.logger import Logger, Level, Style

Logger(style=Style.DATE).format(Level.INFO, "hi", when=datetime(2024, 1, 2))
# '[02/01/2024|INFO ]: hi;\n'
```

## Demo

To print sample messages with colours, file names and line numbers, run:

```
jyggalog-demo
```

The demo ends with a fatal message. It prints `Bye bye!` from its fatal hook and exits with status 1.

## What it does not do

jyggalog writes to streams only. It does not rotate files, filter by logger name, or integrate with the standard `logging` module.