"""Side-by-side monthly comparison of two years.

Built from the normalized monthly series: each year becomes a row of 12
values (January..December) with months that have no observations filled
with 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gsl_migration.series import SeriesPoint


@dataclass(frozen=True)
class YearComparison:
    """Two 12-month rows and the y-extent they share."""

    year1: int
    year2: int
    values1: list[float]
    values2: list[float]

    @property
    def extent(self) -> tuple[float, float]:
        both = self.values1 + self.values2
        return min(both), max(both)


def monthly_grid(series: Sequence[SeriesPoint]) -> dict[int, list[float]]:
    """Pivot a monthly series into ``{year: [12 values]}`` sorted by year."""
    grid: dict[int, list[float]] = {}
    for p in series:
        row = grid.setdefault(p.date.year, [0.0] * 12)
        row[p.date.month - 1] = p.value
    return dict(sorted(grid.items()))


def compare_years(grid: dict[int, list[float]], year1: int, year2: int) -> YearComparison:
    """Select two rows from the grid; a year with no data compares as all zeros."""
    return YearComparison(
        year1=year1,
        year2=year2,
        values1=list(grid.get(year1, [0.0] * 12)),
        values2=list(grid.get(year2, [0.0] * 12)),
    )
