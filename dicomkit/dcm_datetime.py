"""DICOM DT (datetime) values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo

from dicomkit.dcm_date import Date, extract_date
from dicomkit.dcm_time import Time, extract_time
from dicomkit.precision import (
    DT_GROUP_OFFSET_HOURS,
    DT_GROUP_OFFSET_MINUTES,
    DT_GROUP_OFFSET_SIGN,
    DT_REGEX,
    DatetimeParseError,
    Precision,
    extract_duration_info,
    is_included,
)

__all__ = ["Datetime", "parse_datetime"]


def _offset_parts(value: datetime) -> tuple[str, int, int]:
    offset = value.utcoffset()
    total = int(offset.total_seconds()) if offset is not None else 0
    sign = "-" if total < 0 else "+"
    total = abs(total)
    return sign, total // 3600, (total % 3600) // 60


@dataclass
class Datetime:
    """A parsed DICOM datetime with its precision and whether an offset was given."""

    time: datetime
    precision: Precision = Precision.FULL
    no_offset: bool = False

    def dcm(self) -> str:
        """Render as a DT string, truncated to ``precision``."""
        out = Date(time=self.time, precision=self.precision).dcm()
        if is_included(Precision.HOURS, self.precision):
            out += Time(time=self.time, precision=self.precision).dcm()
        if self.no_offset:
            return out
        sign, hours, minutes = _offset_parts(self.time)
        return out + f"{sign}{hours:02d}{minutes:02d}"

    def __str__(self) -> str:
        out = str(Date(time=self.time, precision=self.precision))
        if is_included(Precision.HOURS, self.precision):
            out += " " + str(Time(time=self.time, precision=self.precision))
        if self.no_offset:
            return out
        sign, hours, minutes = _offset_parts(self.time)
        return out + f" {sign}{hours:02d}:{minutes:02d}"


def _submatches(pattern: re.Pattern[str], value: str) -> list[str]:
    match = pattern.fullmatch(value)
    if match is None:
        return []
    return [match.group(0), *(group or "" for group in match.groups())]


def _build(
    year: int,
    month: int,
    day: int,
    hours: int,
    minutes: int,
    seconds: int,
    microseconds: int,
    zone: tzinfo,
) -> datetime:
    # Out-of-range fields roll over into the next larger unit.
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return datetime(year, month, 1, tzinfo=zone) + timedelta(
        days=day - 1,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=microseconds,
    )


def parse_datetime(value: str) -> Datetime:
    """Parse a DT value such as ``YYYYMMDDHHMMSS.FFFFFF&ZZXX``."""
    matches = _submatches(DT_REGEX, value)
    if not matches:
        raise DatetimeParseError()

    year, month, day, precision = extract_date(matches, Precision.FULL, False)
    hours, minutes, seconds, fraction, precision = extract_time(
        matches, precision, False
    )

    try:
        offset_hours = extract_duration_info(matches, DT_GROUP_OFFSET_HOURS, False)
        offset_minutes = extract_duration_info(matches, DT_GROUP_OFFSET_MINUTES, False)
    except ValueError as exc:
        raise DatetimeParseError() from exc

    sign = -1 if matches[DT_GROUP_OFFSET_SIGN] == "-" else 1
    offset = (offset_hours.value * 3600 + offset_minutes.value * 60) * sign

    try:
        zone = timezone(timedelta(seconds=offset))
        parsed = _build(
            year.value,
            month.value,
            day.value,
            hours.value,
            minutes.value,
            seconds.value,
            fraction.value,
            zone,
        )
    except (ValueError, OverflowError) as exc:
        raise DatetimeParseError(f"datetime out of range: {value!r}") from exc

    return Datetime(
        time=parsed,
        precision=precision,
        no_offset=not offset_hours.present_in_source,
    )