"""eBird observation data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date


@dataclass(frozen=True)
class ObservationRecord:
    """One checklist feature reduced to what the aggregator needs."""

    observed_on: date
    species_count: int
