"""GSL Migration - pelican and grebe migration around the Great Salt Lake.

Architecture::

    datasources/   Static inputs (ONI/SST/elevation text, eBird GeoJSON partitions)
    store.py       Read-only access to the data dir + derived payload writes
    analysis/      Pure aggregation, normalization, smoothing, year comparison
    animation/     Cancellable (year, month) replay over the observation map
    renderers/     Plot-ready series -> HTML fragments with embedded chart JSON
    flows/         Prefect orchestration (build loads, transforms, writes site)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources -> analysis -> renderers -> derived/site/
           datasources -> animation -> external frame renderer
"""

__version__ = "0.1.0"

from gsl_migration.config import Settings

__all__ = ["Settings", "__version__"]
