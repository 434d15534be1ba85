"""Climate overlay datasets: ONI, NINO3 SST and GSL elevation.

Public API:
  - client: relative dataset paths and SST filter constants
  - indices: parse_oni, parse_sst
  - elevation: parse_elevation
"""

from gsl_migration.datasources.climate.client import (
    ELEVATION_PATH,
    ONI_PATH,
    SST_MONTH,
    SST_PATH,
    SST_YEAR_RANGE,
)
from gsl_migration.datasources.climate.elevation import parse_elevation
from gsl_migration.datasources.climate.indices import parse_oni, parse_sst

__all__ = [
    "ELEVATION_PATH",
    "ONI_PATH",
    "SST_MONTH",
    "SST_PATH",
    "SST_YEAR_RANGE",
    "parse_elevation",
    "parse_oni",
    "parse_sst",
]
