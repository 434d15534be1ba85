"""Normalized species-reported trend at the GSL, with its moving average."""

from __future__ import annotations

from gsl_migration.renderers import render_template
from gsl_migration.schemas import ChartKind, ChartPayload, SeriesPayload
from gsl_migration.series import SeriesPoint

TITLE = "Normalized Species Reported Over Time at the GSL"


def build_trend_payload(
    common_name: str,
    normalized: list[SeriesPoint],
    smoothed: list[SeriesPoint],
    window: int,
) -> ChartPayload:
    """Build the trend chart payload.

    Args:
        common_name: Species display name used in the legend.
        normalized: Monthly means scaled to [0, 1], starting 2004-01.
        smoothed: Moving average of ``normalized`` (same length and dates).
        window: Window size used for ``smoothed``, shown in the legend.
    """
    return ChartPayload(
        kind=ChartKind.TREND,
        title=TITLE,
        series=[
            SeriesPayload.from_series(common_name, normalized),
            SeriesPayload.from_series(f"{window}-month moving average", smoothed),
        ],
        y_min=0.0,
        y_max=1.0,
        metadata={
            "species": common_name,
            "x_label": "Time (Year-Month)",
            "y_label": "Normalized Species Reported",
        },
    )


def build_trend_html(payload: ChartPayload, chart_id: str) -> str:
    return render_template("chart.html.j2", chart=payload, chart_id=chart_id)
