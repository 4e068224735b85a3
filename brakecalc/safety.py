"""Interactive stopping-distance check that re-asks until inputs are valid."""

import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .braking import compute_brake_distance, reaction_distance


def read_value(
    prompt: str,
    retry_prompt: str,
    is_valid: Callable[[float], bool],
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> float:
    """Prompt for a number, re-asking with ``retry_prompt`` until it is valid.

    Blank lines are skipped; the rest of a rejected line is discarded.
    Raises EOFError if input runs out.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(prompt)
    stdout.flush()
    while True:
        line = stdin.readline()
        if not line:
            raise EOFError("input ended before a valid value was read")
        words = line.split()
        if not words:
            continue
        try:
            value = float(words[0])
        except ValueError:
            value = None
        if value is not None and is_valid(value):
            return value
        stdout.write(retry_prompt)
        stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Read the driving conditions and print whether braking is needed now."""
    out = sys.stdout
    try:
        speed = read_value(
            "Speed (m/s): ",
            "Enter a non-negative speed (m/s): ",
            lambda v: v >= 0.0,
        )
        reaction_time = read_value(
            "Reaction time (s): ",
            "Enter a non-negative reaction time (s): ",
            lambda v: v >= 0.0,
        )
        decel = read_value(
            "Braking deceleration (m/s^2): ",
            "Enter a positive deceleration (m/s^2): ",
            lambda v: v > 0.0,
        )
        distance_to_obstacle = read_value(
            "Distance to obstacle (m): ",
            "Enter a non-negative distance (m): ",
            lambda v: v >= 0.0,
        )
    except EOFError:
        return 1

    d_react = reaction_distance(speed, reaction_time)
    d_brake = compute_brake_distance(speed, decel)
    d_total = d_react + d_brake

    out.write("\n--- Results ---\n")
    out.write(f"Reaction distance: {d_react:g} m\n")
    out.write(f"Braking distance : {d_brake:g} m\n")
    out.write(f"Total stop dist  : {d_total:g} m\n")
    out.write(f"Obstacle dist    : {distance_to_obstacle:g} m\n")

    must_brake = distance_to_obstacle < d_total
    out.write(f"\nDecision: {'BRAKE NOW' if must_brake else 'No immediate brake'}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())