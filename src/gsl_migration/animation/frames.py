"""Loading one map frame: all regional partitions for a single month.

A frame is only produced once every partition has loaded (fan-out/fan-in),
so the renderer never sees a partial month.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from gsl_migration.datasources.ebird.observations import feature_coordinates, features_of
from gsl_migration.datasources.loader import DataLoadError

if TYPE_CHECKING:
    from collections.abc import Callable

    from gsl_migration.timekeys import TimeKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Frame:
    """Observation features for one month, grouped by partition."""

    key: TimeKey
    partitions: dict[str, list[dict[str, Any]]] = field(default_factory=dict)

    @property
    def observations(self) -> list[dict[str, Any]]:
        """All features, in partition order."""
        return [f for features in self.partitions.values() for f in features]

    @property
    def coordinates(self) -> list[tuple[float, float]]:
        """``(lon, lat)`` of every feature that has a usable point geometry."""
        coords = (feature_coordinates(f) for f in self.observations)
        return [c for c in coords if c is not None]

    @property
    def is_empty(self) -> bool:
        return not any(self.partitions.values())


class FrameLoader:
    """
    Resolve a time key to a Frame using a ``YYYY-MM`` -> partition path map.

    Args:
        paths_by_key: ``{"2004-01": {"MX": path, "UT": path, "AZ": path}}``,
            as built by ``monthly_partition_paths``.
        load_json: Blocking loader for one partition file; run in a worker
            thread so partitions load concurrently.
    """

    def __init__(
        self,
        paths_by_key: dict[str, dict[str, str]],
        load_json: Callable[[str], dict[str, Any]],
    ) -> None:
        self.paths_by_key = paths_by_key
        self.load_json = load_json

    async def load(self, key: TimeKey) -> Frame | None:
        """
        Load every partition for ``key``.

        Returns:
            The frame; an empty frame if ``key`` has no entry in the path map;
            None if any partition failed to load (the error is logged).
        """
        paths = self.paths_by_key.get(str(key))
        if not paths:
            logger.debug("No observation files for %s, rendering empty frame", key)
            return Frame(key)

        names = list(paths)
        try:
            payloads = await asyncio.gather(
                *(asyncio.to_thread(self.load_json, paths[name]) for name in names)
            )
        except DataLoadError as exc:
            logger.warning("Skipping frame %s: %s", key, exc)
            return None

        return Frame(key, {name: features_of(p) for name, p in zip(names, payloads, strict=True)})
