"""Geographic partitions of the observation data."""

from __future__ import annotations

# Observation exports are split by region; every monthly frame needs all three.
PARTITIONS: tuple[str, ...] = ("MX", "UT", "AZ")

# (longitude, latitude) of the star marker on the base map
GREAT_SALT_LAKE: tuple[float, float] = (-112.2146, 40.7)
