"""eBird observation exports (GeoJSON) for pelicans and grebes.

Public API:
  - models: ObservationRecord
  - observations: parse_feature, parse_features, features_of, feature_coordinates
  - partitions: monthly_partition_paths (MX/UT/AZ per-month file layout)
"""

from gsl_migration.datasources.ebird.models import ObservationRecord
from gsl_migration.datasources.ebird.observations import (
    feature_coordinates,
    features_of,
    parse_feature,
    parse_features,
)
from gsl_migration.datasources.ebird.partitions import monthly_partition_paths

__all__ = [
    "ObservationRecord",
    "feature_coordinates",
    "features_of",
    "monthly_partition_paths",
    "parse_feature",
    "parse_features",
]
