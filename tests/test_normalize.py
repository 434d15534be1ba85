"""Tests for normalization and smoothing."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from gsl_migration.analysis import (
    DEFAULT_WINDOW,
    moving_average,
    normalize,
    normalize_values,
    padded_extent,
    value_extent,
)
from gsl_migration.series import SeriesPoint, values


def series_of(*vals: float) -> list[SeriesPoint]:
    start = date(2004, 1, 1)
    return [SeriesPoint(start + timedelta(days=31 * i), v) for i, v in enumerate(vals)]


class TestNormalize:
    """Scaling into [0, 1] or [-1, 1]."""

    def test_non_negative(self) -> None:
        assert values(normalize(series_of(2, 4, 1))) == [0.5, 1.0, 0.25]

    def test_signed(self) -> None:
        assert values(normalize(series_of(-2, 1, 0.5), signed=True)) == [-1.0, 0.5, 0.25]

    def test_preserves_dates_and_length(self) -> None:
        src = series_of(3, 6, 9)
        out = normalize(src)
        assert [p.date for p in out] == [p.date for p in src]

    def test_idempotent(self) -> None:
        once = normalize(series_of(1, 7, 3.5))
        assert normalize(once) == once

    def test_all_zero_unchanged(self) -> None:
        assert values(normalize(series_of(0, 0, 0))) == [0, 0, 0]

    def test_non_positive_max_unchanged(self) -> None:
        assert values(normalize(series_of(-3, -1))) == [-3, -1]

    def test_empty(self) -> None:
        assert normalize([]) == []
        assert normalize_values([]) == []

    def test_bounds(self) -> None:
        out = normalize_values([5, -10, 2.5], signed=True)
        assert all(-1 <= v <= 1 for v in out)
        assert min(out) == -1.0


class TestExtents:
    def test_value_extent(self) -> None:
        assert value_extent(series_of(3, -1, 2)) == (-1, 3)
        assert value_extent([]) is None

    def test_padded_extent_pairs(self) -> None:
        assert padded_extent([(2000.0, 4200.0), (2001.0, 4195.5)], 1) == (4194.5, 4201.0)

    def test_padded_extent_series(self) -> None:
        assert padded_extent(series_of(1, 2), 0.5) == (0.5, 2.5)
        assert padded_extent([], 1) is None


class TestMovingAverage:
    """Centered, variable-width window."""

    def test_default_window(self) -> None:
        assert DEFAULT_WINDOW == 30

    def test_small_window(self) -> None:
        assert values(moving_average(series_of(1, 2, 3, 4), window=3)) == pytest.approx(
            [1.5, 2.0, 3.0, 3.5]
        )

    def test_window_one_is_identity(self) -> None:
        src = series_of(4, 8, 15, 16)
        assert moving_average(src, window=1) == src

    def test_default_window_edges(self) -> None:
        out = values(moving_average(series_of(*range(40))))
        # index 0 covers [0, 15), index 20 covers [5, 36), index 39 covers [24, 40)
        assert out[0] == pytest.approx(7.0)
        assert out[20] == pytest.approx(20.0)
        assert out[39] == pytest.approx(31.5)

    def test_preserves_dates_and_length(self) -> None:
        src = series_of(*range(12))
        out = moving_average(src, window=5)
        assert len(out) == len(src)
        assert [p.date for p in out] == [p.date for p in src]

    def test_window_larger_than_series(self) -> None:
        assert values(moving_average(series_of(2, 4), window=30)) == pytest.approx([3.0, 3.0])

    @pytest.mark.parametrize("window", [0, -5])
    def test_invalid_window(self, window: int) -> None:
        with pytest.raises(ValueError, match="window"):
            moving_average(series_of(1, 2), window=window)

    def test_empty(self) -> None:
        assert moving_average([]) == []
