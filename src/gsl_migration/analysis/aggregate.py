"""Group time-stamped records into month or year buckets and average them.

The output ordering is load-bearing: every consumer (normalizer, smoother,
comparison grid) indexes positionally and assumes ascending time order.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from gsl_migration.datasources.ebird.models import ObservationRecord
from gsl_migration.datasources.ebird.observations import features_of, parse_features
from gsl_migration.series import SeriesPoint
from gsl_migration.timekeys import TimeKey

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import date

Dataset = dict[str, Any] | Iterable[ObservationRecord | SeriesPoint]


class Granularity(StrEnum):
    """Bucket size for aggregation."""

    MONTH = "month"
    YEAR = "year"

    def key_for(self, d: date) -> TimeKey:
        if self is Granularity.YEAR:
            return TimeKey(d.year, 0)
        return TimeKey.from_date(d)


@dataclass
class BucketAggregate:
    """Running total and record count for one bucket."""

    key: TimeKey
    total: float = 0.0
    count: int = 0

    def add(self, value: float) -> None:
        self.total += value
        self.count += 1

    @property
    def mean(self) -> float:
        return self.total / self.count


def _samples(dataset: Dataset) -> Iterator[tuple[date, float]]:
    """Yield ``(date, value)`` pairs, skipping unusable records."""
    if isinstance(dataset, dict):
        dataset = parse_features(features_of(dataset))

    for item in dataset:
        if isinstance(item, ObservationRecord):
            yield item.observed_on, float(item.species_count)
        elif isinstance(item, SeriesPoint):
            if math.isnan(item.value):
                continue
            yield item.date, item.value


def bucket_records(
    dataset: Dataset,
    granularity: Granularity = Granularity.MONTH,
) -> dict[TimeKey, BucketAggregate]:
    """
    Fold records into buckets keyed by month or year.

    A bucket only exists once a record maps to it, so ``count`` is never 0.

    Args:
        dataset: GeoJSON FeatureCollection, observation records, or series points.
        granularity: Month or year buckets.

    Returns:
        Buckets in ascending key order.
    """
    buckets: dict[TimeKey, BucketAggregate] = {}
    for observed_on, value in _samples(dataset):
        key = granularity.key_for(observed_on)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = BucketAggregate(key)
        bucket.add(value)
    return {key: buckets[key] for key in sorted(buckets)}


def bucket_means(buckets: dict[TimeKey, BucketAggregate]) -> dict[TimeKey, float]:
    """Reduce each bucket to its arithmetic mean, in ascending key order."""
    return {key: buckets[key].mean for key in sorted(buckets)}


def get_aggregated_series(
    dataset: Dataset,
    granularity: Granularity = Granularity.MONTH,
) -> list[SeriesPoint]:
    """Aggregate a dataset into a chronologically ordered series of bucket means.

    Each point is dated on the first day of its bucket.
    """
    means = bucket_means(bucket_records(dataset, granularity))
    return [SeriesPoint(key.as_date(), mean) for key, mean in means.items()]


def filter_since(series: Iterable[SeriesPoint], start: date) -> list[SeriesPoint]:
    """Drop points dated before ``start``."""
    return [p for p in series if p.date >= start]
