"""Stopping-distance calculations, braking decisions and small numeric helpers in SI units."""

__version__ = "0.1.0"
__all__ = ["braking", "cli", "safety", "mathutils", "calculator", "samples"]