"""Diagnostics package.

- round_trip: Gregorian -> calendar -> Gregorian drift (needs the [diagnostics] extra)
"""

__all__ = ["round_trip"]
