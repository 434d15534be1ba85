"""Dataset loader: read a static text or JSON file from disk or over HTTP.

Sources are either local paths or ``http(s)://`` URLs. Every failure mode
(missing file, HTTP error, connection error, bad JSON) surfaces as a single
``DataLoadError`` so callers can log it and degrade to an empty chart or a
skipped frame.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import requests

from gsl_migration.services.http import get_checked


class DataLoadError(Exception):
    """A dataset could not be fetched or decoded."""

    def __init__(self, source: str | Path, reason: str) -> None:
        super().__init__(f"Failed to load {source}: {reason}")
        self.source = str(source)
        self.reason = reason


def is_remote(source: str | Path) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def load_text(source: str | Path) -> str:
    """Return the text content of ``source``.

    Raises:
        DataLoadError: If the file or URL cannot be read.
    """
    if is_remote(source):
        try:
            return get_checked(str(source)).text
        except requests.RequestException as exc:
            raise DataLoadError(source, str(exc)) from exc

    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise DataLoadError(source, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise DataLoadError(source, f"not valid UTF-8 ({exc.reason})") from exc


def load_json(source: str | Path) -> dict[str, Any]:
    """Return the decoded JSON object at ``source``.

    Raises:
        DataLoadError: If the source cannot be read or is not a JSON object.
    """
    text = load_text(source)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(source, f"invalid JSON ({exc.msg})") from exc
    if not isinstance(payload, dict):
        raise DataLoadError(source, "expected a JSON object")
    return payload
