"""Tests for the year-vs-year monthly comparison."""

from __future__ import annotations

from datetime import date

from gsl_migration.analysis import compare_years, monthly_grid
from gsl_migration.series import SeriesPoint

SERIES = [
    SeriesPoint(date(2009, 1, 1), 0.2),
    SeriesPoint(date(2009, 6, 1), 0.9),
    SeriesPoint(date(2011, 3, 1), 1.0),
    SeriesPoint(date(2011, 12, 1), 0.4),
]


class TestMonthlyGrid:
    def test_rows_of_twelve(self) -> None:
        grid = monthly_grid(SERIES)
        assert list(grid) == [2009, 2011]
        assert all(len(row) == 12 for row in grid.values())

    def test_missing_months_zero(self) -> None:
        grid = monthly_grid(SERIES)
        assert grid[2009] == [0.2, 0, 0, 0, 0, 0.9, 0, 0, 0, 0, 0, 0]
        assert grid[2011][2] == 1.0
        assert grid[2011][11] == 0.4

    def test_sorted_by_year(self) -> None:
        assert list(monthly_grid(list(reversed(SERIES)))) == [2009, 2011]

    def test_empty(self) -> None:
        assert monthly_grid([]) == {}


class TestCompareYears:
    def test_pair(self) -> None:
        cmp = compare_years(monthly_grid(SERIES), 2009, 2011)
        assert cmp.year1 == 2009
        assert cmp.values1[5] == 0.9
        assert cmp.values2[2] == 1.0
        assert cmp.extent == (0, 1.0)

    def test_absent_year_is_zeros(self) -> None:
        cmp = compare_years(monthly_grid(SERIES), 2004, 2023)
        assert cmp.values1 == [0.0] * 12
        assert cmp.values2 == [0.0] * 12
        assert cmp.extent == (0.0, 0.0)

    def test_rows_are_copies(self) -> None:
        grid = monthly_grid(SERIES)
        cmp = compare_years(grid, 2009, 2011)
        cmp.values1[0] = 99.0
        assert grid[2009][0] == 0.2
