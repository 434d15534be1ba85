"""Year-vs-year monthly comparison charts for one species.

One payload per species holds every fixed pair from its story plus the
interactive default pair, so the page can switch between them without
another build.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gsl_migration.analysis import compare_years
from gsl_migration.renderers import render_template
from gsl_migration.schemas import ChartKind, ChartPayload, ComparisonPayload
from gsl_migration.timekeys import MONTH_ABBREVS

if TYPE_CHECKING:
    from collections.abc import Sequence

TITLE = "Normalized Average Species Reported"


def build_comparison_payload(
    common_name: str,
    grid: dict[int, list[float]],
    pairs: Sequence[tuple[int, int]],
) -> ChartPayload:
    """Build comparison rows for each ``(year1, year2)`` pair, in order.

    Duplicate pairs are kept once.
    """
    comparisons: list[ComparisonPayload] = []
    seen: set[tuple[int, int]] = set()
    for year1, year2 in pairs:
        if (year1, year2) in seen:
            continue
        seen.add((year1, year2))
        cmp = compare_years(grid, year1, year2)
        y_min, y_max = cmp.extent
        comparisons.append(
            ComparisonPayload(
                year1=cmp.year1,
                year2=cmp.year2,
                values1=[round(v, 4) for v in cmp.values1],
                values2=[round(v, 4) for v in cmp.values2],
                y_min=y_min,
                y_max=y_max,
            )
        )

    return ChartPayload(
        kind=ChartKind.COMPARISON,
        title=f"{common_name}: {TITLE}",
        comparisons=comparisons,
        metadata={
            "species": common_name,
            "years": ",".join(str(y) for y in grid),
            "x_label": "Month",
            "y_label": TITLE,
        },
    )


def build_comparison_html(payload: ChartPayload, chart_id: str) -> str:
    return render_template(
        "comparison.html.j2",
        chart=payload,
        chart_id=chart_id,
        months=MONTH_ABBREVS,
    )
