"""DICOM TM (time) values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Sequence

from dicomkit.precision import (
    DT_GROUP_FRACTAL,
    DT_GROUP_HOURS,
    DT_GROUP_MINUTES,
    DT_GROUP_SECONDS,
    TM_GROUP_FRACTAL,
    TM_GROUP_HOURS,
    TM_GROUP_MINUTES,
    TM_GROUP_SECONDS,
    TM_REGEX,
    ZERO_TIMEZONE,
    DurationInfo,
    Precision,
    TimeParseError,
    extract_duration_info,
    is_included,
    truncate_fraction,
    update_precision,
)

__all__ = ["Time", "parse_time", "extract_time"]


@dataclass
class Time:
    """A parsed DICOM time with the precision it was stored at."""

    time: datetime
    precision: Precision = Precision.FULL

    def _render(self, separator: str) -> str:
        out = f"{self.time.hour:02d}"
        if not is_included(Precision.MINUTES, self.precision):
            return out
        out += f"{separator}{self.time.minute:02d}"
        if not is_included(Precision.SECONDS, self.precision):
            return out
        out += f"{separator}{self.time.second:02d}"
        if not is_included(Precision.MS1, self.precision):
            return out
        return out + "." + truncate_fraction(self.time.microsecond, self.precision)

    def dcm(self) -> str:
        """Render as a TM string, truncated to ``precision`` (time zone ignored)."""
        return self._render("")

    def __str__(self) -> str:
        return self._render(":")


def _submatches(pattern: re.Pattern[str], value: str) -> list[str]:
    match = pattern.fullmatch(value)
    if match is None:
        return []
    return [match.group(0), *(group or "" for group in match.groups())]


def extract_time(
    matches: Sequence[str], precision_in: Precision, is_tm: bool
) -> tuple[DurationInfo, DurationInfo, DurationInfo, DurationInfo, Precision]:
    """Extract hours, minutes, seconds and fraction from TM or DT sub-matches."""
    if is_tm:
        indexes = (TM_GROUP_HOURS, TM_GROUP_MINUTES, TM_GROUP_SECONDS, TM_GROUP_FRACTAL)
    else:
        indexes = (DT_GROUP_HOURS, DT_GROUP_MINUTES, DT_GROUP_SECONDS, DT_GROUP_FRACTAL)
    hours_idx, minutes_idx, seconds_idx, fraction_idx = indexes

    hours = extract_duration_info(matches, hours_idx, False)
    precision = update_precision(hours, precision_in, Precision.HOURS, False)

    minutes = extract_duration_info(matches, minutes_idx, False)
    precision = update_precision(minutes, precision, Precision.MINUTES, False)

    seconds = extract_duration_info(matches, seconds_idx, False)
    precision = update_precision(seconds, precision, Precision.SECONDS, False)

    fraction = extract_duration_info(matches, fraction_idx, True)
    if fraction.present_in_source:
        precision = fraction.fractional_precision

    return hours, minutes, seconds, fraction, precision


def parse_time(value: str) -> Time:
    """Parse a TM value such as ``HHMMSS.FFFFFF``."""
    matches = _submatches(TM_REGEX, value)
    if not matches:
        raise TimeParseError()

    hours, minutes, seconds, fraction, precision = extract_time(
        matches, Precision.FULL, True
    )
    try:
        parsed = datetime(1, 1, 1, tzinfo=ZERO_TIMEZONE) + timedelta(
            hours=hours.value,
            minutes=minutes.value,
            seconds=seconds.value,
            microseconds=fraction.value,
        )
    except (ValueError, OverflowError) as exc:
        raise TimeParseError(f"time out of range: {value!r}") from exc

    return Time(time=parsed, precision=precision)