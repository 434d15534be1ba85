"""ONI and NINO3 SST text file parsers."""

from __future__ import annotations

from datetime import date

from gsl_migration.datasources.climate.client import (
    SST_MONTH,
    SST_VALUE_COLUMN,
    SST_YEAR_RANGE,
)
from gsl_migration.series import SeriesPoint


def _to_float(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def parse_oni(text: str) -> list[SeriesPoint]:
    """
    Parse an ONI index file: one row per year, ``year`` then 12 monthly values.

    Rows whose first column is not a year (headers) are skipped, as are
    non-numeric monthly cells. Output is in file order (chronological).
    """
    points: list[SeriesPoint] = []
    for line in text.strip().splitlines():
        cols = line.split()
        if not cols or not cols[0].isdigit():
            continue
        year = int(cols[0])
        for month_index, cell in enumerate(cols[1:13]):
            value = _to_float(cell)
            if value is None:
                continue
            points.append(SeriesPoint(date(year, month_index + 1, 1), value))
    return points


def parse_sst(
    text: str,
    *,
    month: int = SST_MONTH,
    year_range: tuple[int, int] = SST_YEAR_RANGE,
) -> list[SeriesPoint]:
    """
    Parse a NINO SST file, keeping one month per year inside ``year_range``.

    Columns are positional: 0 = year, 1 = month (1-based), 5 = NINO3 anomaly.
    Points are dated on January 1st of their year so the overlay lines up
    with yearly buckets.
    """
    first_year, last_year = year_range
    points: list[SeriesPoint] = []
    for line in text.strip().splitlines():
        cols = line.split()
        if len(cols) <= SST_VALUE_COLUMN:
            continue
        if not (cols[0].isdigit() and cols[1].isdigit()):
            continue
        year, row_month = int(cols[0]), int(cols[1])
        if row_month != month or not first_year <= year <= last_year:
            continue
        value = _to_float(cols[SST_VALUE_COLUMN])
        if value is None:
            continue
        points.append(SeriesPoint(date(year, 1, 1), value))
    return points
