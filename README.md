# crona

An experimental job scheduler. It reads a config file of cron-like lines
with a leading seconds field and, once a second, starts every command
whose schedule matches the current local time. Each due job runs in its
own thread, so a slow job does not hold up the next tick.

## Installing

```
pip install .
```

## Config file

By default crona reads `.crona` in the current working directory. Each
line that is not empty and does not start with `//` describes one task:

```
// second minute hour day-of-month month day-of-week command [args...]
* * * * * * php main.php
0 0 */2 * * * ./sample.sh
0 0 9-17 * * 1,2,3,4,5 ./report.sh
```

Fields are separated by **single** spaces; spaces at the start and end of
a line are ignored, but two spaces between fields make the line invalid.
Each time field accepts:

- `*`: every value
- `N`: a single number
- `A,B,C`: a list of numbers
- `N-M`: an inclusive range
- `*/N`: every N-th value, counted from the field's minimum

Field limits: second 0–59, minute 0–59, hour 0–23, day of month 1–31,
month 1–12, day of week 0–6 (Sunday is 0). Every number in a list or
range, and the step in `*/N`, must lie within the field's limits.

The command is the seventh word; the remaining words are passed to it as
arguments, unchanged (no shell, no quoting). A line with fewer than seven
words, an invalid field, or a command starting with `*` is skipped with a
warning.

## Running

```
crona                      # read ./.crona, log errors only
crona -c /path/to/config   # use another config file
crona -l info              # log level: debug, info, warn, error
crona version              # print the version
```

An unrecognised log level name falls back to `info`. If the config file
cannot be found or read, crona logs the error and exits with status 1.
Otherwise it runs until interrupted (Ctrl-C exits with status 130). Each
job's output goes to crona's own standard output and standard error; a
job that cannot start or exits non-zero is logged as an error and the
scheduler carries on.

## Using it as a library

```python
from datetime import datetime

from crona.file_driver import FileDriver
from crona.scheduler import Cron
from crona.tasks import get_task_manager

driver = FileDriver()
driver.init("jobs.conf")          # or driver.init() for ./.crona
manager = get_task_manager()
for task in driver.parse():
    manager.add_task(task)

due = manager.next(datetime.now())   # tasks whose schedule matches now
Cron().run_due(datetime.now())       # start them, returns the threads
```

- `crona.options.ParseOptions` holds the six fields and offers
  `match_second`, `match_minute`, `match_hour`, `match_day`,
  `match_month`, `match_week` and `match_time`; `Bound.validate` checks a
  single field and raises `ValueError` when it is not acceptable.
- `crona.file_driver.FileDriver.as_task` turns one line into a `Task`,
  raising `InvalidTaskError`; `ConfigError` signals a missing or
  unreadable file.
- `crona.scheduler.Cron.start` ticks once a second until `Cron.stop` is
  called.
- Setting `crona.executor.runtime_flags.test_mode` replaces real process
  execution with a stand-in that runs nothing (and fails when
  `test_executor_error` is also set).

## What it does not do

- Month and weekday names (`jan`, `mon`, ...) are not accepted; use
  numbers.
- There is no daemon mode and no log file option; crona runs in the
  foreground and logs to standard error.
- Ticks missed while the process is busy or suspended are not caught up.

## Running the tests

```
pip install .[test]
pytest
```