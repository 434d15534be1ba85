"""Parsing eBird GeoJSON feature collections into observation records.

Each feature carries ``properties.observation_date`` (ISO-ish date string,
optionally with a time part) and ``properties.species_reported`` (a
string-encoded integer). Features that fail to parse are dropped rather than
counted as zero.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from gsl_migration.datasources.ebird.models import ObservationRecord

if TYPE_CHECKING:
    from collections.abc import Iterable


def features_of(collection: dict[str, Any] | None) -> list[dict[str, Any]]:
    """Return the feature list of a FeatureCollection, or [] if absent."""
    if not collection:
        return []
    features = collection.get("features")
    return features if isinstance(features, list) else []


def _parse_date(raw: Any) -> date | None:
    if not raw or not isinstance(raw, str):
        return None
    try:
        return date.fromisoformat(raw.strip()[:10])
    except ValueError:
        return None


def _parse_count(raw: Any) -> int | None:
    # A missing count reads as "0", matching how the exports were produced.
    if raw is None:
        raw = "0"
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        count = raw
    else:
        try:
            count = int(str(raw).strip())
        except ValueError:
            return None
    return count if count >= 0 else None


def parse_feature(feature: dict[str, Any]) -> ObservationRecord | None:
    """Parse one feature. Returns None if it is not an object or the date or count is invalid."""
    if not isinstance(feature, dict):
        return None
    props = feature.get("properties")
    if not isinstance(props, dict):
        props = {}
    observed_on = _parse_date(props.get("observation_date"))
    if observed_on is None:
        return None
    count = _parse_count(props.get("species_reported"))
    if count is None:
        return None
    return ObservationRecord(observed_on=observed_on, species_count=count)


def parse_features(features: Iterable[dict[str, Any]]) -> list[ObservationRecord]:
    """Parse features, silently skipping malformed ones."""
    records: list[ObservationRecord] = []
    for feature in features:
        parsed = parse_feature(feature)
        if parsed is not None:
            records.append(parsed)
    return records


def feature_coordinates(feature: dict[str, Any]) -> tuple[float, float] | None:
    """``(longitude, latitude)`` of a point feature, or None if unusable."""
    if not isinstance(feature, dict):
        return None
    geometry = feature.get("geometry")
    if not isinstance(geometry, dict):
        return None
    coords = geometry.get("coordinates")
    if not isinstance(coords, list | tuple) or len(coords) < 2:
        return None
    try:
        return float(coords[0]), float(coords[1])
    except (TypeError, ValueError):
        return None
