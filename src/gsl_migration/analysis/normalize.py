"""Rescale series into a bounded range so differently-scaled lines share an axis.

Two modes:
  - non-negative series (species counts): divide by ``max(value)`` -> [0, 1]
  - signed series (ONI-like anomalies): divide by ``max(|value|)`` -> [-1, 1],
    which keeps zero centered

A degenerate divisor (empty series, all-zero values, or a non-positive
maximum) falls back to 1, leaving values unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gsl_migration.series import SeriesPoint, values

if TYPE_CHECKING:
    from collections.abc import Sequence


def _divisor(values: Sequence[float], *, signed: bool) -> float:
    if not values:
        return 1.0
    peak = max(abs(v) for v in values) if signed else max(values)
    return peak if peak > 0 else 1.0


def normalize_values(values: Sequence[float], *, signed: bool = False) -> list[float]:
    """Normalize bare floats; output aligned 1:1 with the input."""
    divisor = _divisor(values, signed=signed)
    return [v / divisor for v in values]


def normalize(series: Sequence[SeriesPoint], *, signed: bool = False) -> list[SeriesPoint]:
    """Normalize a series without changing its length, order or dates."""
    scaled = normalize_values(values(series), signed=signed)
    return [SeriesPoint(p.date, v) for p, v in zip(series, scaled, strict=True)]


def value_extent(series: Sequence[SeriesPoint]) -> tuple[float, float] | None:
    """``(min, max)`` of the values, or None for an empty series."""
    if not series:
        return None
    vals = values(series)
    return min(vals), max(vals)


def padded_extent(
    series: Sequence[SeriesPoint] | Sequence[tuple[float, float]],
    pad: float,
) -> tuple[float, float] | None:
    """Value extent widened by ``pad`` on both sides (chart y-domains)."""
    if not series:
        return None
    vals = [p.value if isinstance(p, SeriesPoint) else p[1] for p in series]
    return min(vals) - pad, max(vals) + pad
