"""Interactive braking calculator with a fixed 10% safety margin."""

import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from .braking import estimate_stop, needs_brake

MARGIN = 0.10


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_number(tokens: Iterator[str], prompt: str, out: TextIO) -> float | None:
    out.write(prompt)
    out.flush()
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for speed, reaction time, deceleration and distance; print the decision."""
    out = sys.stdout
    tokens = _tokens(sys.stdin)
    prompts = (
        "Enter speed (m/s): ",
        "Enter reaction time (s): ",
        "Enter decel magnitude (m/s^2): ",
        "Enter distance to obstacle (m): ",
    )
    values = []
    for prompt in prompts:
        value = _read_number(tokens, prompt, out)
        if value is None:
            return 1
        values.append(value)
    speed, reaction_time, decel, distance_to_obs = values

    try:
        estimate = estimate_stop(speed, reaction_time, decel, MARGIN)
        brake = needs_brake(distance_to_obs, speed, reaction_time, decel, MARGIN)
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    out.write(f"\nReaction distance:            {estimate.reaction:.3f} m\n")
    out.write(f"Brake distance:               {estimate.braking:.3f} m\n")
    out.write(f"Total distance (no margin):   {estimate.total:.3f} m\n")
    out.write(f"Total distance (+10% margin): {estimate.total_with_margin:.3f} m\n")
    out.write(f"Decision (margin=10%):        {'BRAKE' if brake else 'OK'}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())