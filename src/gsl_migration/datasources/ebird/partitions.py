"""Per-month partition file layout for the observation map."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gsl_migration.timekeys import iter_keys

if TYPE_CHECKING:
    from gsl_migration.reference.species import SpeciesDataset


def monthly_partition_paths(
    species: SpeciesDataset,
    start_year: int = 2004,
    end_year: int = 2023,
) -> dict[str, dict[str, str]]:
    """
    Map every ``YYYY-MM`` key in range to its partition file paths.

    Args:
        species: Species whose exports to enumerate.
        start_year: First year (January) included.
        end_year: Last year (December) included.

    Returns:
        ``{"2004-01": {"MX": ".../AMP_MX_2004-01.json", "UT": ..., "AZ": ...}, ...}``
    """
    paths: dict[str, dict[str, str]] = {}
    for key in iter_keys(start_year, end_year):
        paths[str(key)] = {p: species.monthly_path(p, str(key)) for p in species.partitions}
    return paths
