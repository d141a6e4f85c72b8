# ftkit

A small toolkit of C-flavoured helpers in plain Python (character tests,
number conversion, bounded string and byte-buffer operations, a linked list,
a minimal `printf` and a buffered line reader), together with a threaded
dining philosophers simulation and its `philo` command.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `ftkit.chars` | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`; each takes a code point or a one-character string |
| `ftkit.conversion` | `atoi` (skips leading whitespace, one optional sign, digits up to the first non-digit, 0 if none) and `itoa` |
| `ftkit.strings` | `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `substr`, `strtrim`, `split`, `strmapi`, `striteri` |
| `ftkit.memory` | `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc` on `bytearray` buffers |
| `ftkit.linked_list` | `Node` and `LinkedList` with `push_front`, `push_back`, `last`, `len()`, iteration, `clear`, `for_each` and `map` |
| `ftkit.output` | `put_char`, `put_str`, `put_endl`, `put_nbr`, `format_printf` and `printf` |
| `ftkit.line_reader` | `LineReader`, which reads a text or binary stream one line at a time through a fixed-size buffer (42 by default) |
| `ftkit.philo_config` | `SimulationConfig`, `parse_arguments`, `UsageError`, `ConfigError` |
| `ftkit.philo_clock` | `timestamp_ms` and `sleep_ms` |
| `ftkit.philo_table` | `Table`, `Philosopher` and `Action` |
| `ftkit.philo_simulation` | `philosopher_routine`, `monitor_routine`, `check_death`, `check_meals_completed`, `run_simulation` and `main` |

A few conventions worth knowing:

- `strlcpy` and `strlcat` return a pair: the resulting text and the length
  they tried to create, so truncation can be detected.
- `strchr`, `strrchr`, `strnstr` and `memchr` return an index, or `None`
  when nothing is found. Searching for `"\0"` with `strchr`/`strrchr` finds
  the end of the string.
- The functions in `ftkit.memory` change `bytearray` buffers in place and
  raise `ValueError` when a length reaches past the end of a buffer.
- `format_printf` supports `%c %s %p %d %i %u %x %X` and `%%`. Integers are
  treated as 32-bit values; `None` prints as `(null)` for `%s` and `(nil)` for
  `%p`. Too few arguments raise `TypeError`. `printf` writes the same text and
  returns its length.

## Examples

```python
from ftkit.conversion import atoi, itoa
from ftkit.strings import split, strlcpy, strtrim

atoi("   -42abc")          # -42
itoa(-123)                 # "-123"
split("  a b  c ", " ")    # ["a", "b", "c"]
strtrim("xxhixx", "x")     # "hi"
strlcpy("hello", 3)        # ("he", 5)
```

```python
from ftkit.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
items.push_back(4)
len(items)                 # 5
list(items)                # [0, 1, 2, 3, 4]
list(items.map(lambda x: x * 10))   # [0, 10, 20, 30, 40]
```

```python
import io
from ftkit.line_reader import LineReader

reader = LineReader(io.StringIO("one\ntwo\nthree"), 4)
for line in reader:
    print(repr(line))      # 'one\n', 'two\n', 'three'
```

```python
from ftkit.output import format_printf

format_printf("%d%% of %s is %x", 50, "ff", 127)   # "50% of ff is 7f"
```

## The dining philosophers

The `philo` command runs the simulation:

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

For example:

```
philo 5 800 200 200
philo 4 410 200 200 7
```

All times are in milliseconds. Between 1 and 200 philosophers are allowed and
every time must be positive. The optional meal count must be positive; `-1`
means no limit, the same as leaving it out. A wrong number of arguments prints
a usage line, and a setting out of range prints an error; both exit with
status 1.

Each philosopher runs in its own thread and a monitor thread watches them.
Every state change is printed in colour as `<elapsed ms> <philosopher id>
<action>`, the actions being `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. The run stops when a philosopher goes `time_to_die`
milliseconds without eating, or, if a meal count was given, once every
philosopher has eaten that many times. A philosopher alone at the table has
only one fork and dies.

The same can be done from Python; `run_simulation` returns the finished
`Table`:

```python
import sys
from ftkit.philo_config import parse_arguments
from ftkit.philo_simulation import run_simulation

config = parse_arguments(["philo", "4", "410", "200", "200", "3"])
config.validate()
table = run_simulation(config, sys.stdout)
[p.meals_eaten for p in table.philosophers]
```

## Limits

- Character tests and case conversion look at ASCII only, whatever the locale.
- `printf` has no flags, field widths or precision; an unknown conversion
  prints nothing.
- Timing in the simulation relies on thread scheduling, so under heavy load
  the reported times can drift by a few milliseconds.