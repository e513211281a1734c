# dining

A simulation of the dining philosophers problem. Philosophers sit around a
table and share one fork with each neighbour. Each one thinks, takes first
its left fork and then its right fork, eats, puts the forks back and sleeps,
over and over. Each philosopher runs in its own thread. Philosophers with an
even number start one millisecond late. A monitor thread ends the run when a
philosopher starves, or, when a meal count is given, when every philosopher
has eaten that many meals.

## Installation

```
pip install .
```

## Usage

```
dining number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

All times are in milliseconds. Every argument must be a whole number made
only of digits, optionally preceded by `+`, and greater than zero. A value
too large for a 32-bit signed integer is rejected as not positive.

For example:

```
dining 5 800 200 200 7
```

Each state change is printed on standard output as one line. The line gives
the number of milliseconds since the start, the philosopher's number
(counting from 1) and what happened:

```
0 1 is thinking
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
```

The states are `is thinking`, `has taken a fork`, `is eating` and
`is sleeping`. A philosopher starves once `time_to_die` milliseconds pass
since the start of its last meal (or since the start of the run); the
monitor then prints `<ms> <id> died` and no further status lines appear.
A philosopher who has eaten the required number of meals stops; when all of
them have, the run ends without a `died` line.

The command exits with status 0 after a run. If the arguments are invalid,
it prints an error message such as `Error: invalid number of arguments`,
`Error: invalid argument '<arg>'` or
`Error: arguments must be positive integers`, and exits with status 1.

## Library use

```python
from dining.args import parse_args
from dining.simulation import Simulation

args = parse_args(["4", "410", "200", "200", "3"])
Simulation(args).run()
```

- `dining.args.parse_args(argv)` takes the arguments without the program
  name and returns an `Args` with the fields `n_philos`, `time_to_die`,
  `time_to_eat`, `time_to_sleep` and `must_eat` (`None` when no meal count
  is given). It raises `dining.args.ArgumentError`, a `ValueError`, when the
  arguments are invalid.
- `dining.args.is_number(text)` and `dining.args.parse_int(text)` are the
  checks and the integer reader it uses; `parse_int` raises `OverflowError`
  outside the 32-bit signed range.
- `dining.simulation.Simulation(args, out=None)` writes its status lines to
  `out`, or to standard output when `out` is not given. `run()` starts the
  philosopher threads and the monitor and returns once all of them have
  finished. Afterwards `philosophers` holds each `Philosopher` with its
  `meals_eaten`, and `someone_died` is `True`.
- `dining.cli.main(argv=None)` is the command; it returns the exit status.

## Tests

```
pip install .[test]
pytest
```