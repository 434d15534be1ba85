"""Tests for the DataStore module."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from gsl_migration.datasources.loader import DataLoadError
from gsl_migration.store import DataStore


class TestDataStoreInit:
    def test_creates_paths(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.base == tmp_path
        assert store.climate == tmp_path / "climate_data"
        assert store.derived == tmp_path / "derived"
        assert store.remote is None

    def test_remote_trailing_slash_trimmed(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path, "https://example.org/gsl/")
        assert store.remote == "https://example.org/gsl"


class TestDataStoreInputs:
    """Static datasets, local or remote."""

    def test_source_local(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.source("climate_data/oni_data.txt") == tmp_path / "climate_data/oni_data.txt"

    def test_source_remote(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path, "https://example.org/gsl")
        assert (
            store.source("amp_geojsons/filtered_AMP_UT_Year_Avgs.json")
            == "https://example.org/gsl/amp_geojsons/filtered_AMP_UT_Year_Avgs.json"
        )

    def test_source_remote_strips_dot_prefix_only(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path, "https://example.org/gsl")
        assert (
            store.source("./climate_data/oni.txt")
            == "https://example.org/gsl/climate_data/oni.txt"
        )
        assert store.source(".hidden/x.json") == "https://example.org/gsl/.hidden/x.json"

    @pytest.mark.parametrize("relative", ["../secrets.txt", "a/../../b.json", "/etc/passwd"])
    def test_source_remote_escape_rejected(self, tmp_path: Path, relative: str) -> None:
        store = DataStore(tmp_path, "https://example.org/gsl")
        with pytest.raises(ValueError, match="escapes"):
            store.source(relative)

    def test_read_text(self, tmp_path: Path) -> None:
        (tmp_path / "climate_data").mkdir()
        (tmp_path / "climate_data" / "oni_data.txt").write_text("2004 0.4\n")
        assert DataStore(tmp_path).read_text("climate_data/oni_data.txt") == "2004 0.4\n"

    def test_read_json(self, tmp_path: Path) -> None:
        (tmp_path / "c.json").write_text('{"features": []}')
        assert DataStore(tmp_path).read_json("c.json") == {"features": []}

    def test_read_missing(self, tmp_path: Path) -> None:
        with pytest.raises(DataLoadError):
            DataStore(tmp_path).read_text("climate_data/missing.txt")

    def test_read_json_remote(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path, "https://example.org/gsl")
        with patch("gsl_migration.store.load_json", return_value={"features": []}) as mock_load:
            assert store.read_json("eg_geojsons/x.json") == {"features": []}
        mock_load.assert_called_once_with("https://example.org/gsl/eg_geojsons/x.json")

    def test_escape_rejected(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "data")
        with pytest.raises(ValueError, match="escapes"):
            store.read_text("../secrets.txt")


class TestDataStoreWrite:
    """Derived payloads with metadata envelopes."""

    def test_envelope_format(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        path = store.write(
            Path("derived/charts/climate.json"), {"title": "x"}, source="oni", kind="climate"
        )
        data = json.loads(path.read_text())
        assert data["meta"]["source"] == "oni"
        assert data["meta"]["kind"] == "climate"
        assert "generated_at" in data["meta"]
        assert data["data"] == {"title": "x"}

    def test_creates_parent_dirs(self, tmp_path: Path) -> None:
        DataStore(tmp_path).write(Path("derived/a/b/c.json"), [], source="test")
        assert (tmp_path / "derived" / "a" / "b" / "c.json").exists()

    def test_write_escape_rejected(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "data")
        with pytest.raises(ValueError, match="escapes"):
            store.write(Path("../out.json"), {}, source="test")


class TestDataStoreRead:
    def test_read_missing_file(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.read_raw(Path("derived/none.json")) is None

    def test_read_raw_returns_envelope(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("derived/t.json"), {"key": "value"}, source="test")
        raw = store.read_raw(Path("derived/t.json"))
        assert raw is not None
        assert set(raw) == {"meta", "data"}
