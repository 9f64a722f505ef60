"""DICOM DA (date) values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Sequence

from dicomkit.precision import (
    DA_GROUP_DAY,
    DA_GROUP_MONTH,
    DA_GROUP_YEAR,
    DA_REGEX,
    DA_REGEX_NEMA,
    DT_GROUP_DAY,
    DT_GROUP_MONTH,
    DT_GROUP_YEAR,
    ZERO_TIMEZONE,
    DateParseError,
    DurationInfo,
    Precision,
    extract_duration_info,
    is_included,
    update_precision,
)

__all__ = ["Date", "parse_date", "extract_date"]


@dataclass
class Date:
    """A parsed DICOM date with the precision it was stored at."""

    time: datetime
    precision: Precision = Precision.FULL
    is_nema: bool = False

    def dcm(self) -> str:
        """Render as a DA string, truncated to ``precision`` (time zone ignored)."""
        separator = "." if self.is_nema else ""
        out = f"{self.time.year:04d}"
        if not is_included(Precision.MONTH, self.precision):
            return out
        out += f"{separator}{self.time.month:02d}"
        if not is_included(Precision.DAY, self.precision):
            return out
        return out + f"{separator}{self.time.day:02d}"

    def __str__(self) -> str:
        out = f"{self.time.year:04d}"
        if not is_included(Precision.MONTH, self.precision):
            return out
        out += f"-{self.time.month:02d}"
        if not is_included(Precision.DAY, self.precision):
            return out
        return out + f"-{self.time.day:02d}"


def _submatches(pattern: re.Pattern[str], value: str) -> list[str]:
    match = pattern.fullmatch(value)
    if match is None:
        return []
    return [match.group(0), *(group or "" for group in match.groups())]


def extract_date(
    matches: Sequence[str], precision_in: Precision, is_da: bool
) -> tuple[DurationInfo, DurationInfo, DurationInfo, Precision]:
    """Extract year, month and day from DA or DT sub-matches, with the resulting precision."""
    if is_da:
        year_idx, month_idx, day_idx = DA_GROUP_YEAR, DA_GROUP_MONTH, DA_GROUP_DAY
    else:
        year_idx, month_idx, day_idx = DT_GROUP_YEAR, DT_GROUP_MONTH, DT_GROUP_DAY

    year = extract_duration_info(matches, year_idx, False)
    precision = update_precision(year, precision_in, Precision.YEAR, False)

    month = extract_duration_info(matches, month_idx, False)
    if not month.present_in_source:
        month.value = 1
    precision = update_precision(month, precision, Precision.MONTH, False)

    day = extract_duration_info(matches, day_idx, False)
    if not day.present_in_source:
        day.value = 1
    precision = update_precision(day, precision, Precision.DAY, is_da)

    return year, month, day, precision


def _normalized_date(year: int, month: int, day: int) -> datetime:
    # Out-of-range months and days roll over into neighbouring months and years.
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return datetime(year, month, 1, tzinfo=ZERO_TIMEZONE) + timedelta(days=day - 1)


def parse_date(value: str) -> Date:
    """Parse a DA value (or a legacy NEMA-300 ``YYYY.MM.DD`` value)."""
    is_nema = False
    matches = _submatches(DA_REGEX, value)
    if not matches:
        matches = _submatches(DA_REGEX_NEMA, value)
        is_nema = True
    if not matches:
        raise DateParseError()

    year, month, day, precision = extract_date(matches, Precision.FULL, True)
    try:
        parsed = _normalized_date(year.value, month.value, day.value)
    except (ValueError, OverflowError) as exc:
        raise DateParseError(f"date out of range: {value!r}") from exc

    return Date(time=parsed, precision=precision, is_nema=is_nema)