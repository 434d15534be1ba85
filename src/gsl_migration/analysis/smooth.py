"""Centered moving average used for the trend overlay."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gsl_migration.series import SeriesPoint

if TYPE_CHECKING:
    from collections.abc import Sequence

# Buckets per window for monthly series (~2.5 years)
DEFAULT_WINDOW = 30


def moving_average(
    series: Sequence[SeriesPoint],
    window: int = DEFAULT_WINDOW,
) -> list[SeriesPoint]:
    """
    Smooth a series with a centered, variable-width window.

    Point ``i`` averages indices ``[max(0, i - window // 2),
    min(n, i + window // 2 + 1))``. There is no padding: edge points average
    over fewer samples, so with ``window=30`` index 0 covers ``[0, 15)``.

    Args:
        series: Chronologically ordered points.
        window: Window size in buckets (>= 1).

    Returns:
        A series with the same length and dates as the input.

    Raises:
        ValueError: If ``window`` is less than 1.
    """
    if window < 1:
        msg = f"window must be >= 1, got {window}"
        raise ValueError(msg)

    half = window // 2
    n = len(series)
    # Prefix sums keep this linear in n.
    prefix = [0.0]
    for p in series:
        prefix.append(prefix[-1] + p.value)

    smoothed: list[SeriesPoint] = []
    for i, p in enumerate(series):
        start = max(0, i - half)
        end = min(n, i + half + 1)
        smoothed.append(SeriesPoint(p.date, (prefix[end] - prefix[start]) / (end - start)))
    return smoothed
