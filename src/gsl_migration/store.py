"""Data directory access: static inputs in, derived chart payloads out.

Layout under ``base_dir``::

    climate_data/      ONI, SST and elevation text files (read-only)
    amp_geojsons/      pelican exports: monthly MX/UT/AZ partitions + UT trend file
    eg_geojsons/       grebe exports, same layout
    derived/           chart payloads and the rendered site (written by the build)

Inputs can also come from a remote mirror with the same relative layout
(``remote`` base URL); derived output is always local.

Every derived JSON file is wrapped in a metadata envelope recording where it
came from and when it was generated.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path, PurePosixPath
from typing import Any

from gsl_migration.datasources.loader import load_json, load_text

# Chart payloads written by the build, relative to the data dir
CHARTS_DIR = Path("derived/charts")


class DataStore:
    """Reads static datasets and writes metadata-enveloped derived files."""

    def __init__(self, base_dir: Path, remote: str | None = None) -> None:
        self.base = base_dir
        self.remote = remote.rstrip("/") if remote else None
        self.climate = base_dir / "climate_data"
        self.derived = base_dir / "derived"

    # ------------------------------------------------------------------
    # Static inputs
    # ------------------------------------------------------------------

    def source(self, relative: str) -> str | Path:
        """Where the loader should read ``relative`` from (URL or local path)."""
        if self.remote:
            remote_path = PurePosixPath(relative.removeprefix("./"))
            if remote_path.is_absolute() or ".." in remote_path.parts:
                msg = f"Path escapes data directory: {relative}"
                raise ValueError(msg)
            return f"{self.remote}/{remote_path}"
        return self._resolve(Path(relative))

    def read_text(self, relative: str) -> str:
        """Read a static text dataset. Raises ``DataLoadError`` on failure."""
        return load_text(self.source(relative))

    def read_json(self, relative: str) -> dict[str, Any]:
        """Read a static JSON dataset. Raises ``DataLoadError`` on failure."""
        return load_json(self.source(relative))

    # ------------------------------------------------------------------
    # Derived output
    # ------------------------------------------------------------------

    def write(self, path: Path, data: Any, source: str, **params: Any) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``derived/charts/oni.json``).
            data: Payload to store under the ``data`` key.
            source: Dataset(s) the payload was derived from.
            **params: Extra metadata fields (species, window size, etc.).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "generated_at": datetime.now(UTC).isoformat(),
        }
        if params:
            meta.update(params)

        with full.open("w") as f:
            json.dump({"meta": meta, "data": data}, f, indent=2)

        return full

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data), or None if missing."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes data directory: {path}"
            raise ValueError(msg) from None
        return full
