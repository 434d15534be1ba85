"""
Payload models for derived chart data.

Pydantic models for what the build flow writes under ``derived/``.
The external charting library reads these; renderers embed them in HTML.
"""

from __future__ import annotations

import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gsl_migration.series import SeriesPoint


# =============================================================================
# Core
# =============================================================================


class ChartKind(StrEnum):
    """Chart families rendered on the site."""

    CLIMATE = "climate"
    ELEVATION = "elevation"
    TREND = "trend"
    COMPARISON = "comparison"


# =============================================================================
# Series
# =============================================================================


class PointPayload(BaseModel):
    """One plotted point. ``x`` is a date, or a fractional year for elevation."""

    x: datetime.date | float
    y: float


class SeriesPayload(BaseModel):
    """A named, ordered series as the chart layer consumes it."""

    name: str = Field(..., description="Legend label")
    points: list[PointPayload] = Field(default_factory=list)
    y_min: float | None = Field(default=None, description="Own y-domain, if not the chart's")
    y_max: float | None = None

    @classmethod
    def from_series(
        cls,
        name: str,
        series: Sequence[SeriesPoint],
        digits: int = 4,
        **extra: Any,
    ) -> SeriesPayload:
        return cls(
            name=name,
            points=[PointPayload(x=p.date, y=round(p.value, digits)) for p in series],
            **extra,
        )

    @classmethod
    def from_pairs(
        cls,
        name: str,
        pairs: Sequence[tuple[float, float]],
        digits: int = 4,
        **extra: Any,
    ) -> SeriesPayload:
        return cls(
            name=name,
            points=[PointPayload(x=x, y=round(y, digits)) for x, y in pairs],
            **extra,
        )


# =============================================================================
# Charts
# =============================================================================


class ComparisonPayload(BaseModel):
    """Two years' monthly rows (January..December) for a side-by-side chart."""

    year1: int
    year2: int
    values1: list[float] = Field(..., min_length=12, max_length=12)
    values2: list[float] = Field(..., min_length=12, max_length=12)
    y_min: float
    y_max: float


class ChartPayload(BaseModel):
    """Everything one chart needs: series, y-domain, and optional comparisons."""

    model_config = {"str_strip_whitespace": True}

    kind: ChartKind
    title: str
    series: list[SeriesPayload] = Field(default_factory=list)
    y_min: float | None = None
    y_max: float | None = None
    comparisons: list[ComparisonPayload] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not any(s.points for s in self.series) and not self.comparisons
