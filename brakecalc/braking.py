"""Stopping-distance calculations and the brake decision (SI units).

Speeds are in m/s, decelerations in m/s^2, times in s and distances in m.
"""

from dataclasses import dataclass

DEFAULT_SAFETY_MARGIN = 0.10


def _require_positive_decel(decel: float) -> None:
    if not decel > 0:
        raise ValueError("decel must be > 0")


def _require_non_negative_reaction(reaction_time: float) -> None:
    if not reaction_time >= 0:
        raise ValueError("reaction_time must be >= 0")


def _require_non_negative_margin(safety_margin: float) -> None:
    if not safety_margin >= 0:
        raise ValueError("safety_margin must be >= 0")


def compute_brake_distance(speed: float, decel: float) -> float:
    """Distance to brake from ``speed`` to rest: s = v^2 / (2a)."""
    _require_positive_decel(decel)
    return (speed * speed) / (2.0 * decel)


def reaction_distance(speed: float, reaction_time: float) -> float:
    """Distance covered during the reaction delay: d = v * t."""
    _require_non_negative_reaction(reaction_time)
    return speed * reaction_time


@dataclass(frozen=True)
class StoppingEstimate:
    """The parts of a stopping distance and the margin applied to them."""

    reaction: float
    braking: float
    safety_margin: float = DEFAULT_SAFETY_MARGIN

    @property
    def total(self) -> float:
        """Reaction plus braking distance, without margin."""
        return self.reaction + self.braking

    @property
    def total_with_margin(self) -> float:
        """Total stopping distance scaled by ``1 + safety_margin``."""
        return self.total * (1.0 + self.safety_margin)


def estimate_stop(
    speed: float,
    reaction_time: float,
    decel: float,
    safety_margin: float = DEFAULT_SAFETY_MARGIN,
) -> StoppingEstimate:
    """Compute the reaction and braking distances for the given conditions."""
    _require_positive_decel(decel)
    _require_non_negative_reaction(reaction_time)
    _require_non_negative_margin(safety_margin)
    return StoppingEstimate(
        reaction=reaction_distance(speed, reaction_time),
        braking=compute_brake_distance(speed, decel),
        safety_margin=safety_margin,
    )


def needs_brake(
    distance_to_obstacle: float,
    speed: float,
    reaction_time: float,
    decel: float,
    safety_margin: float = DEFAULT_SAFETY_MARGIN,
) -> bool:
    """True when the stopping distance with margin reaches the obstacle."""
    estimate = estimate_stop(speed, reaction_time, decel, safety_margin)
    return estimate.total_with_margin >= distance_to_obstacle