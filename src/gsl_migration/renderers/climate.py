"""ONI and NINO3 January SST chart.

ONI is plotted on its own y-domain with the SST line on a secondary axis.
The background color band is keyed by the signed-normalized ONI value, so
strong El Niño maps to +1 and strong La Niña to -1.
"""

from __future__ import annotations

from gsl_migration.analysis import normalize, value_extent
from gsl_migration.renderers import render_template
from gsl_migration.schemas import ChartKind, ChartPayload, SeriesPayload
from gsl_migration.series import SeriesPoint

TITLE = "ONI Index & NINO3 January Temperatures"


def build_climate_payload(oni: list[SeriesPoint], sst: list[SeriesPoint]) -> ChartPayload:
    """Build the climate chart payload.

    Args:
        oni: Monthly ONI series in chronological order.
        sst: January NINO3 SST series.

    Returns:
        Payload with ONI, normalized ONI and SST series. SST carries its own
        y-domain; ``color_extent`` is the largest absolute value of either
        series, for a symmetric color scale.
    """
    oni_extent = value_extent(oni)
    sst_extent = value_extent(sst)
    peak = max((abs(p.value) for p in (*oni, *sst)), default=0.0)

    series = [
        SeriesPayload.from_series("ONI Index", oni),
        SeriesPayload.from_series(
            "ONI (normalized)", normalize(oni, signed=True), y_min=-1, y_max=1
        ),
        SeriesPayload.from_series(
            "NINO3 Temperature",
            sst,
            y_min=sst_extent[0] if sst_extent else None,
            y_max=sst_extent[1] if sst_extent else None,
        ),
    ]
    return ChartPayload(
        kind=ChartKind.CLIMATE,
        title=TITLE,
        series=series,
        y_min=oni_extent[0] if oni_extent else None,
        y_max=oni_extent[1] if oni_extent else None,
        metadata={"color_extent": f"{peak:.4f}", "x_label": "Year", "y_label": "ONI Index"},
    )


def build_climate_html(payload: ChartPayload) -> str:
    return render_template("chart.html.j2", chart=payload, chart_id="climate")
