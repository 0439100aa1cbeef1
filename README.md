# advent2017

Solutions to days 1 to 20 of the 2017 programming puzzle calendar. Every day
is a module of the `advent2017` package (`advent2017.day01` to
`advent2017.day20`) that you can import, and a command that prints the
day's answers for your own puzzle input.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command-line use

Each day has its own command, `advent2017-day01` through
`advent2017-day20`. Each takes one optional argument: the path of the
puzzle input, which defaults to `input.txt` in the current directory.
Day 3 is the exception: its argument is the square number itself, with
361527 as the default.

```
advent2017-day01
advent2017-day10 my-input.txt
advent2017-day03 1024
```

Days 7 and 8 skip input lines they cannot parse; the other days stop with
an error on malformed input.

## Library use

The puzzle logic lives in plain functions and classes:

```python
from advent2017.day01 import solve_captcha, solve_second_captcha
from advent2017.day03 import distance, value_greater_than
from advent2017.day10 import knot_hash
from advent2017.day17 import Spinlock

solve_captcha("1122")            # 3
solve_second_captcha("1212")     # 6
distance(1024)                   # 31
value_greater_than(780)          # 806
knot_hash(b"AoC 2017")           # "33efeb34ea91902bb2f59c9920caa6cd"
Spinlock(3).value_after_latest(2017)  # 638
```

Records are parsed with `Program.parse` (day 7), `Instruction.parse`
(day 8), `Direction.parse` (day 11), `Particle.parse` (day 20),
`parse_dance_move` (day 16) and `parse_instruction` (day 18). Malformed
input raises the day's parse error: `ProgramParseError`,
`InstructionParseError`, `DirectionParseError`, `ParticleParseError` or
`DanceMoveParseError`. All of them are subclasses of `ValueError`.

A few highlights:

- `advent2017.day03.spiral_positions` and `spiral_values` are endless
  generators over the spiral memory.
- `advent2017.day07.Tower` finds the bottom program of a tower and the
  weight that would balance it.
- `advent2017.day08.Processor` runs conditional register instructions and
  tracks the largest value ever held.
- `advent2017.day10.dense_hash` gives the 16 raw bytes of a knot hash,
  `knot_hash` its hexadecimal form.
- `advent2017.day14.Grid` builds a 128 by 128 disk grid from knot hashes
  and counts used squares and regions.
- `advent2017.day18.Vm` runs programs concurrently in threads, passing
  values over queues. A program stops when it runs off its instructions or
  waits longer than the timeout (one second by default) for a value.
- `advent2017.day19.Map` follows a routing diagram and collects the
  letters along the way.

## Limits

- Only days 1 to 20 are covered.
- Some days give one answer only: day 10 prints the full knot hash,
  day 15 counts matches of the pickier generators over 5,000,000 pairs,
  day 16 prints the order after 1,000,000,000 dances, day 18 counts the
  values sent by program 1, and day 20 names the particle that stays
  closest to the origin (colliding particles are not removed).
- Day 15 and day 17's `value_after_zero(50_000_000)` are slow in pure
  Python; expect them to take a while.

## Supported Python

Python 3.10 and later. The package has no runtime dependencies.