"""The plot-ready series type passed between analysis steps and renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date


@dataclass(frozen=True)
class SeriesPoint:
    """One (date, value) sample of a time series."""

    date: date
    value: float


def values(series: Sequence[SeriesPoint]) -> list[float]:
    return [p.value for p in series]

