"""(year, month) time keys shared by the aggregator, the charts and the sequencer.

Months are 0-based (0 = January) everywhere in code. The string form used by
the static file layout is ``YYYY-MM`` with a 1-based, zero-padded month, so
``TimeKey(2004, 0)`` is ``"2004-01"``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

MONTH_ABBREVS = [name[:3] for name in MONTH_NAMES]


@dataclass(frozen=True, order=True)
class TimeKey:
    """A calendar month bucket. Orders chronologically."""

    year: int
    month: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.month <= 11:
            msg = f"month must be in [0, 11], got {self.month}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month + 1:02d}"

    @classmethod
    def parse(cls, text: str) -> TimeKey:
        """Parse ``YYYY-MM`` (1-based month) into a key."""
        year_str, _, month_str = text.strip().partition("-")
        return cls(int(year_str), int(month_str) - 1)

    @classmethod
    def from_date(cls, d: date) -> TimeKey:
        return cls(d.year, d.month - 1)

    def as_date(self) -> date:
        """First day of the bucket."""
        return date(self.year, self.month + 1, 1)

    @property
    def label(self) -> str:
        """Display label, e.g. ``January 2004``."""
        return f"{MONTH_NAMES[self.month]} {self.year}"


def advance(key: TimeKey, step: int) -> TimeKey:
    """Move the cursor forward by ``step`` months.

    On overflow (month >= 12) the month resets to 0 and the year increments,
    matching the replay cadence of the observation map.
    """
    month = key.month + step
    if month >= 12:
        return TimeKey(key.year + 1, 0)
    return TimeKey(key.year, month)


def iter_keys(start_year: int, end_year: int) -> Iterator[TimeKey]:
    """Every month key from January ``start_year`` through December ``end_year``."""
    for year in range(start_year, end_year + 1):
        for month in range(12):
            yield TimeKey(year, month)


def key_from_fractional_year(x: float) -> TimeKey:
    """Invert a linear year axis position (e.g. ``2010.5``) to a month key.

    Used by the elevation chart, whose x axis is a plain number of years.
    """
    year = math.floor(x)
    month = min(11, math.floor((x - year) * 12))
    return TimeKey(year, month)


def interpolate_at(points: Sequence[tuple[float, float]], x: float) -> float | None:
    """Linearly interpolate a value at ``x`` over points sorted by x.

    Returns None when ``x`` falls outside the covered range or fewer than two
    points are available.
    """
    if len(points) < 2 or x < points[0][0] or x > points[-1][0]:
        return None

    i = 0
    while i < len(points) - 2 and points[i + 1][0] < x:
        i += 1

    (x1, y1), (x2, y2) = points[i], points[i + 1]
    if x2 == x1:
        return y1
    t = (x - x1) / (x2 - x1)
    return y1 + t * (y2 - y1)
