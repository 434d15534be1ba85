"""
Prefect flow for building the static site from the data directory.

Loads climate and observation datasets, runs them through the analysis
pipeline, writes chart payloads under ``derived/charts/`` and renders the
page into the site directory.

Run locally:
    python -m gsl_migration.flows.build
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from pathlib import Path  # noqa: TC003
from typing import Any

from prefect import flow, task

from gsl_migration.analysis import (
    Granularity,
    filter_since,
    get_aggregated_series,
    monthly_grid,
    moving_average,
    normalize,
)
from gsl_migration.config import get_settings
from gsl_migration.datasources.climate import (
    ELEVATION_PATH,
    ONI_PATH,
    SST_PATH,
    parse_elevation,
    parse_oni,
    parse_sst,
)
from gsl_migration.datasources.ebird import monthly_partition_paths
from gsl_migration.datasources.loader import DataLoadError
from gsl_migration.reference import GREAT_SALT_LAKE, SPECIES, SpeciesDataset
from gsl_migration.renderers import render_template
from gsl_migration.renderers.climate import build_climate_html, build_climate_payload
from gsl_migration.renderers.comparison import build_comparison_html, build_comparison_payload
from gsl_migration.renderers.elevation import build_elevation_html, build_elevation_payload
from gsl_migration.renderers.trend import build_trend_html, build_trend_payload
from gsl_migration.schemas import ChartPayload
from gsl_migration.series import SeriesPoint
from gsl_migration.store import CHARTS_DIR, DataStore

settings = get_settings()

# Store and output paths
store = DataStore(settings.data_dir, settings.data_url)
SITE_DIR = settings.site_dir

SITE_TITLE = "Pelicans, Grebes and the Great Salt Lake"


# =============================================================================
# Data loading tasks
# =============================================================================


def _read_text(relative: str) -> str | None:
    try:
        return store.read_text(relative)
    except DataLoadError as exc:
        print(f"Warning: {exc}")
        return None


@task(name="load-oni")
def load_oni() -> list[SeriesPoint]:
    """Load the monthly ONI series (empty if unavailable)."""
    text = _read_text(ONI_PATH)
    return parse_oni(text) if text is not None else []


@task(name="load-sst")
def load_sst() -> list[SeriesPoint]:
    """Load the January NINO3 SST series (empty if unavailable)."""
    text = _read_text(SST_PATH)
    return parse_sst(text) if text is not None else []


@task(name="load-elevation")
def load_elevation() -> list[tuple[float, float]]:
    """Load GSL elevation readings (empty if unavailable)."""
    text = _read_text(ELEVATION_PATH)
    return parse_elevation(text) if text is not None else []


@task(name="load-observations")
def load_observations(species: SpeciesDataset) -> dict[str, Any] | None:
    """Load the Utah observation FeatureCollection used by the trend charts."""
    try:
        return store.read_json(species.trend_path)
    except DataLoadError as exc:
        print(f"Warning: {exc}")
        return None


# =============================================================================
# Transform tasks
# =============================================================================


@task(name="analyze-species")
def analyze_species(
    collection: dict[str, Any],
    since: date,
    window: int,
) -> tuple[list[SeriesPoint], list[SeriesPoint], dict[int, list[float]]]:
    """
    Monthly means -> normalized -> (trend since ``since``, its moving average, year grid).

    Normalization uses the peak over the whole dataset, before the date
    filter, so early months can still set the scale.
    """
    normalized = normalize(get_aggregated_series(collection, Granularity.MONTH))
    trend = filter_since(normalized, since)
    return trend, moving_average(trend, window), monthly_grid(normalized)


@task(name="write-chart")
def write_chart(name: str, payload: ChartPayload, source: str) -> Path:
    """Write one chart payload to ``derived/charts/{name}.json``."""
    return store.write(
        CHARTS_DIR / f"{name}.json",
        payload.model_dump(mode="json"),
        source=source,
        kind=str(payload.kind),
    )


# =============================================================================
# Main build task and flow
# =============================================================================


@task(name="build-species-section")
def build_species_section(species: SpeciesDataset) -> dict[str, Any]:
    """Charts and map settings for one species' part of the page."""
    collection = load_observations(species)
    if collection is None:
        print(f"Warning: No observations for {species.common_name}. Building empty charts.")
        trend: list[SeriesPoint] = []
        smoothed: list[SeriesPoint] = []
        grid: dict[int, list[float]] = {}
    else:
        trend, smoothed, grid = analyze_species(
            collection, date(settings.start_year, 1, 1), settings.smoothing_window
        )

    trend_payload = build_trend_payload(
        species.common_name, trend, smoothed, settings.smoothing_window
    )
    comparison_payload = build_comparison_payload(
        species.common_name,
        grid,
        [*species.fixed_comparisons, species.default_comparison],
    )
    write_chart(f"{species.slug}_trend", trend_payload, species.trend_path)
    write_chart(f"{species.slug}_comparison", comparison_payload, species.trend_path)

    return {
        "slug": species.slug,
        "common_name": species.common_name,
        "frames": monthly_partition_paths(species, settings.start_year, settings.end_year),
        "start": f"{settings.start_year:04d}-01",
        "end_year": settings.end_year,
        "step_months": settings.step_months,
        "interval_ms": round(settings.tick_interval * 1000),
        "trend_chart": build_trend_html(trend_payload, f"{species.slug}-trend"),
        "comparison_chart": build_comparison_html(
            comparison_payload, f"{species.slug}-comparison"
        ),
    }


@task(name="build-html")
def build_html(
    climate: ChartPayload,
    elevation: ChartPayload,
    species_sections: list[dict[str, Any]],
) -> str:
    """Assemble the page from chart fragments."""
    return render_template(
        "base.html.j2",
        title=SITE_TITLE,
        updated=datetime.now(UTC).strftime("%Y-%m-%d %H:%M UTC"),
        climate_chart=build_climate_html(climate),
        elevation_chart=build_elevation_html(elevation),
        species_sections=species_sections,
        marker=GREAT_SALT_LAKE,
    )


@task(name="write-site")
def write_site(html: str) -> Path:
    """Write HTML to site directory."""
    SITE_DIR.mkdir(parents=True, exist_ok=True)
    output_path = SITE_DIR / "index.html"
    with output_path.open("w") as f:
        f.write(html)
    return output_path


@flow(name="build-site", log_prints=True)
def build_all() -> dict[str, Any]:
    """
    Build chart payloads and the static site from the data directory.

    Missing datasets are reported and rendered as empty charts rather than
    failing the build.
    """
    print("Loading climate data...")
    oni = load_oni()
    sst = load_sst()
    elevation = load_elevation()
    if not oni and not sst:
        print("Warning: No climate data found. Building with an empty climate chart.")

    climate_payload = build_climate_payload(oni, sst)
    elevation_payload = build_elevation_payload(elevation)
    write_chart("climate", climate_payload, f"{ONI_PATH},{SST_PATH}")
    write_chart("elevation", elevation_payload, ELEVATION_PATH)

    sections = []
    for species in SPECIES.values():
        print(f"Building {species.common_name} charts...")
        sections.append(build_species_section(species))

    print("Building HTML...")
    html = build_html(climate_payload, elevation_payload, sections)

    print("Writing site...")
    output_path = write_site(html)

    print(f"Site built: {output_path}")
    return {"pages": 1, "charts": 2 + 2 * len(sections), "output": str(output_path)}


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
