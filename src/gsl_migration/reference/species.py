"""The two species stories and where their exports live under the data dir."""

from __future__ import annotations

from dataclasses import dataclass, field

from gsl_migration.reference.geography import PARTITIONS


@dataclass(frozen=True)
class SpeciesDataset:
    """File layout and story constants for one species."""

    slug: str
    code: str
    common_name: str
    directory: str
    fixed_comparisons: tuple[tuple[int, int], ...] = field(default_factory=tuple)
    default_comparison: tuple[int, int] = (2004, 2023)

    def monthly_path(self, partition: str, key: str) -> str:
        """Relative path of one partition's GeoJSON for a ``YYYY-MM`` key."""
        return f"{self.directory}/monthly_{partition}_jsons/{self.code}_{partition}_{key}.json"

    @property
    def trend_path(self) -> str:
        """Relative path of the Utah observation dataset used by the trend charts."""
        return f"{self.directory}/filtered_{self.code}_UT_Year_Avgs.json"

    @property
    def partitions(self) -> tuple[str, ...]:
        return PARTITIONS


PELICAN = SpeciesDataset(
    slug="pelican",
    code="AMP",
    common_name="American White Pelican",
    directory="amp_geojsons",
    fixed_comparisons=((2009, 2011), (2010, 2011), (2015, 2023)),
)

GREBE = SpeciesDataset(
    slug="grebe",
    code="EG",
    common_name="Eared Grebe",
    directory="eg_geojsons",
    fixed_comparisons=((2009, 2011), (2011, 2015)),
)

SPECIES: dict[str, SpeciesDataset] = {s.slug: s for s in (PELICAN, GREBE)}
