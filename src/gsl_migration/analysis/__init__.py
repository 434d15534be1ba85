"""Pure series transforms: aggregation, normalization, smoothing, comparison.

Each chart is built by calling these in sequence::

    series = get_aggregated_series(geojson, Granularity.MONTH)
    normalized = normalize(series)
    trend = moving_average(normalized, window=30)

Dependency rule: analysis/ imports datasource *models and parsers* only.
It never loads data and never produces HTML. Every function returns a new
list; inputs are not mutated.
"""

from gsl_migration.analysis.aggregate import (
    BucketAggregate,
    Granularity,
    bucket_means,
    bucket_records,
    filter_since,
    get_aggregated_series,
)
from gsl_migration.analysis.comparison import YearComparison, compare_years, monthly_grid
from gsl_migration.analysis.normalize import (
    normalize,
    normalize_values,
    padded_extent,
    value_extent,
)
from gsl_migration.analysis.smooth import DEFAULT_WINDOW, moving_average

__all__ = [
    "DEFAULT_WINDOW",
    "BucketAggregate",
    "Granularity",
    "YearComparison",
    "bucket_means",
    "bucket_records",
    "compare_years",
    "filter_since",
    "get_aggregated_series",
    "monthly_grid",
    "moving_average",
    "normalize",
    "normalize_values",
    "padded_extent",
    "value_extent",
]
