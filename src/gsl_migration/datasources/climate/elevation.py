"""Great Salt Lake elevation series parser."""

from __future__ import annotations


def parse_elevation(text: str) -> list[tuple[float, float]]:
    """
    Parse ``year<TAB>elevation_ft`` rows into ``(year, value)`` pairs.

    The year column may be fractional (sub-annual readings). Malformed rows
    are skipped; output is sorted by year.
    """
    points: list[tuple[float, float]] = []
    for line in text.strip().splitlines():
        parts = line.split("\t")
        if len(parts) < 2:
            continue
        try:
            points.append((float(parts[0]), float(parts[1])))
        except ValueError:
            continue
    return sorted(points)
