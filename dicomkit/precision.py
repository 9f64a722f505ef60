"""Precision levels, parse errors and shared helpers for DICOM DA, TM and DT values."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from datetime import timezone
from typing import Sequence

__all__ = [
    "Precision",
    "DateParseError",
    "TimeParseError",
    "DatetimeParseError",
    "DurationInfo",
    "is_included",
    "truncate_fraction",
    "extract_duration_info",
    "update_precision",
    "ZERO_TIMEZONE",
    "DA_REGEX",
    "DA_REGEX_NEMA",
    "DT_REGEX",
    "TM_REGEX",
]


class Precision(enum.IntEnum):
    """How many segments of a date/time value are significant.

    Lower values are more precise; FULL is the most precise level.
    """

    FULL = 0
    MS5 = 1
    MS4 = 2
    MS3 = 3
    MS2 = 4
    MS1 = 5
    SECONDS = 6
    MINUTES = 7
    HOURS = 8
    DAY = 9
    MONTH = 10
    YEAR = 11

    def __str__(self) -> str:
        return self.name


class DateParseError(ValueError):
    """Raised when a DA (date) value cannot be parsed."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "error parsing dicom DA (date) value -- expected format is 'YYYYMMDD'"
        )


class TimeParseError(ValueError):
    """Raised when a TM (time) value cannot be parsed."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "error parsing dicom TM (time) value, but expected format is 'HHMMSS.FFFFFF'"
        )


class DatetimeParseError(ValueError):
    """Raised when a DT (datetime) value cannot be parsed."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "error parsing dicom DT (datetime) value -- expected format is "
            "'YYYYMMDDHHMMSS.FFFFFF&ZZXX'"
        )


# DA, TM and DT values carry no zone of their own, so a nameless zero offset is used.
ZERO_TIMEZONE = timezone.utc

# All patterns are meant to be used with ``fullmatch``.

# DICOM DA (date): YYYYMMDD
DA_REGEX = re.compile(r"(?P<YEAR>[0-9]{4})(?P<MONTH>[0-9]{2})?(?P<DAY>[0-9]{2})?")

# Legacy NEMA-300 date: YYYY.MM.DD
DA_REGEX_NEMA = re.compile(
    r"(?P<YEAR>[0-9]{4})(?:\.(?P<MONTH>[0-9]{2}))?(?:\.(?P<DAY>[0-9]{2}))?"
)

DA_GROUP_YEAR = 1
DA_GROUP_MONTH = 2
DA_GROUP_DAY = 3

# DICOM DT (datetime): YYYYMMDDHHMMSS.FFFFFF&ZZXX
DT_REGEX = re.compile(
    r"(?P<YEAR>[0-9]{4})"
    r"(?P<MONTH>[0-9]{2})?"
    r"(?P<DAY>[0-9]{2})?"
    r"(?P<HOURS>[0-9]{2})?"
    r"(?P<MINUTES>[0-9]{2})?"
    r"(?P<SECONDS>[0-9]{2})?"
    r"(:?\.(?P<FRACTAL>[0-9]{1,6}))?(:?(?P<OFFSET_SIGN>[-+])"
    r"(?P<OFFSET_HOURS>[0-9]{2})(?P<OFFSET_SECONDS>[0-9]{2}))?"
)

DT_GROUP_YEAR = 1
DT_GROUP_MONTH = 2
DT_GROUP_DAY = 3
DT_GROUP_HOURS = 4
DT_GROUP_MINUTES = 5
DT_GROUP_SECONDS = 6
DT_GROUP_FRACTAL = 8
DT_GROUP_OFFSET_SIGN = 10
DT_GROUP_OFFSET_HOURS = 11
DT_GROUP_OFFSET_MINUTES = 12

# DICOM TM (time): HHMMSS.FFFFFF
TM_REGEX = re.compile(
    r"(?P<HOURS>[0-9]{2})?(?P<MINUTES>[0-9]{2})?(?P<SECONDS>[0-9]{2})?"
    r"(?:\.(?P<FRACTAL>[0-9]{1,6}))?"
)

TM_GROUP_HOURS = 1
TM_GROUP_MINUTES = 2
TM_GROUP_SECONDS = 3
TM_GROUP_FRACTAL = 4


@dataclass
class DurationInfo:
    """One parsed segment of a DA, TM or DT value.

    For fractional seconds ``value`` is in microseconds.
    """

    value: int = 0
    present_in_source: bool = False
    fractional_precision: Precision = Precision.FULL


def is_included(check: Precision, limit: Precision) -> bool:
    """Return whether a segment at level ``check`` is rendered at precision ``limit``."""
    return check >= limit


def truncate_fraction(microseconds: int, precision: Precision) -> str:
    """Render microseconds as a six-digit fraction truncated to ``precision``."""
    digits = f"{microseconds:06d}"
    return digits[: 6 - int(precision)]


def extract_duration_info(
    matches: Sequence[str], index: int, is_fractional: bool
) -> DurationInfo:
    """Extract one segment from regex sub-matches (group 0 first, "" for absent groups)."""
    if len(matches) <= index:
        raise ValueError("not enough sub-matches")

    value_str = matches[index] or ""
    info = DurationInfo(present_in_source=value_str != "")
    if not info.present_in_source:
        return info

    if is_fractional:
        missing = 6 - len(value_str)
        value_str += "0" * missing
        info.fractional_precision = Precision(Precision.FULL + missing)

    try:
        info.value = int(value_str)
    except ValueError as exc:
        raise ValueError(f"error parsing int: {exc}") from exc
    return info


def update_precision(
    info: DurationInfo, current: Precision, info_level: Precision, level_is_full: bool
) -> Precision:
    """Return the precision after considering a parsed segment."""
    if not info.present_in_source:
        return current
    if level_is_full:
        return Precision.FULL
    return info_level