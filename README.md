# brakecalc

This package computes stopping distances and decides whether to brake. All quantities are in SI units:

- speed in m/s
- deceleration in m/s² (a positive magnitude)
- time in s
- distance in m

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from brakecalc.braking import (
    compute_brake_distance,
    reaction_distance,
    needs_brake,
    estimate_stop,
)

compute_brake_distance(20.0, 5.0)   # 40.0   (v² / 2a)
reaction_distance(10.0, 1.2)        # 12.0   (v · t)

# reaction 20 m + braking 40 m = 60 m, plus a 10 % margin = 66 m
needs_brake(45.0, 20.0, 1.0, 5.0, 0.10)    # True
needs_brake(100.0, 20.0, 1.0, 5.0, 0.10)   # False
```

`needs_brake` returns `True` when the total stopping distance reaches or exceeds the distance to the obstacle. The total is enlarged by the safety margin before the comparison, and the margin defaults to `0.10`. Each of the following raises `ValueError`:

- a deceleration that is not positive
- a negative reaction time
- a negative margin

`estimate_stop(speed, reaction_time, decel, safety_margin=0.10)` returns a frozen `StoppingEstimate` with these members:

- `reaction`
- `braking`
- `safety_margin`
- the properties `total` and `total_with_margin`

### Other helpers

`brakecalc.mathutils`:

- `factorial(n)` returns the product of 2..n, which is `1` for any `n` below 2.
- `sum_to(n)` returns the sum of 1..n, which is `0` for any `n` below 1.

`brakecalc.calculator`:

- `calculate(a, op, b)` applies `+`, `-`, `*` or `/`.
- An unknown operator or a division by zero raises `CalculatorError`, which is a subclass of `ValueError`.

`brakecalc.samples`:

- `summarize(values)` returns a `Summary` with `total`, `maximum` and `average`. It raises `ValueError` for an empty input.
- `describe_integer(x)` returns a pair of strings for the sign and the parity, for example `("X is negative", "X is odd")`.
- `make_dataset(n)` returns the squares `0, 1, 4, …` of 0..n-1.
- `make_samples(n)` returns `0, 10, 20, …`.
- Both `make_dataset` and `make_samples` raise `ValueError` for a negative `n`.

## Commands

All commands read their input from standard input and take no command-line options.

### brake-cli

`brake-cli` asks for four values:

- speed
- reaction time
- deceleration
- distance to the obstacle

It then prints the reaction, braking and total distances to three decimal places, followed by the decision under a 10 % margin (`BRAKE` or `OK`). It exits with status 1 in either of these cases:

- an entry is missing or is not a number
- the values are out of range, for example a non-positive deceleration; an error is written to standard error

```
$ brake-cli
Enter speed (m/s): 20
Enter reaction time (s): 1
Enter decel magnitude (m/s^2): 5
Enter distance to obstacle (m): 45

Reaction distance:            20.000 m
Brake distance:               40.000 m
Total distance (no margin):   60.000 m
Total distance (+10% margin): 66.000 m
Decision (margin=10%):        BRAKE
```

### brake-safety

`brake-safety` asks for the same four values but keeps prompting until each one is valid:

- non-negative speed
- non-negative time
- non-negative distance
- positive deceleration

It then reports the distances and prints `BRAKE NOW` when the obstacle is closer than the total stopping distance, and `No immediate brake` otherwise. No margin is applied. If input ends before all values are read, it exits with status 1. The prompting it uses is available as `brakecalc.safety.read_value`.

### brake-math

`brake-math` reads an integer and prints its factorial and the sum from 1 to it. If the input is not an integer, it exits with status 1.

### brake-calculator

`brake-calculator` reads expressions such as `3 * 4` and prints the result. It then asks whether to go again, and any answer other than `y` or `Y` ends it. A malformed line is reported and asked for again. An unknown operator or a division by zero is reported as a message.

## Limits

The package does only one-off calculations. It does not model changing speed, road conditions or vehicle dynamics beyond constant deceleration, and it keeps no history of past decisions.