"""Great Salt Lake elevation chart.

The x axis is a plain fractional year. Hover reads go through
``timekeys.interpolate_at`` and clicks through ``key_from_fractional_year``,
so the payload keeps the raw ``(year, feet)`` pairs.
"""

from __future__ import annotations

from gsl_migration.analysis import padded_extent
from gsl_migration.renderers import render_template
from gsl_migration.schemas import ChartKind, ChartPayload, SeriesPayload

TITLE = "GSL Elevation Over Time"

# Feet of headroom above and below the data on the y axis
Y_PADDING_FT = 1.0


def build_elevation_payload(points: list[tuple[float, float]]) -> ChartPayload:
    extent = padded_extent(points, Y_PADDING_FT)
    return ChartPayload(
        kind=ChartKind.ELEVATION,
        title=TITLE,
        series=[SeriesPayload.from_pairs("Elevation (ft)", points)],
        y_min=extent[0] if extent else None,
        y_max=extent[1] if extent else None,
        metadata={"x_label": "Year", "y_label": "Elevation (ft)"},
    )


def build_elevation_html(payload: ChartPayload) -> str:
    return render_template("chart.html.j2", chart=payload, chart_id="elevation")
