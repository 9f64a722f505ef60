"""Decoding of DICOM byte strings according to the Specific Character Set."""

from __future__ import annotations

import codecs
import enum
from dataclasses import dataclass
from typing import Iterable

__all__ = [
    "CodingSystemType",
    "CodingSystem",
    "UnknownCharacterSetError",
    "parse_specific_character_set",
]


class CodingSystemType(enum.IntEnum):
    """Which part of a value a coding system applies to (relevant for PN values)."""

    ALPHABETIC = 0
    IDEOGRAPHIC = 1
    PHONETIC = 2


class UnknownCharacterSetError(ValueError):
    """Raised when a Specific Character Set term is not supported."""


# DICOM defined terms mapped to Python codec names. The single-byte Latin,
# Turkish and Thai sets follow the WHATWG label resolution (windows code pages).
_CODEC_NAMES: dict[str, str] = {
    "": "cp1252",
    "ISO_IR 6": "cp1252",
    "ISO 2022 IR 6": "cp1252",
    "ISO_IR 13": "shift_jis",
    "ISO 2022 IR 13": "shift_jis",
    "ISO_IR 100": "cp1252",
    "ISO 2022 IR 100": "cp1252",
    "ISO_IR 101": "iso8859_2",
    "ISO 2022 IR 101": "iso8859_2",
    "ISO_IR 109": "iso8859_3",
    "ISO 2022 IR 109": "iso8859_3",
    "ISO_IR 110": "iso8859_4",
    "ISO 2022 IR 110": "iso8859_4",
    "ISO_IR 126": "iso8859_7",
    "ISO 2022 IR 126": "iso8859_7",
    "ISO_IR 127": "iso8859_6",
    "ISO 2022 IR 127": "iso8859_6",
    "ISO_IR 138": "iso8859_8",
    "ISO 2022 IR 138": "iso8859_8",
    "ISO_IR 144": "iso8859_5",
    "ISO 2022 IR 144": "iso8859_5",
    "ISO_IR 148": "cp1254",
    "ISO 2022 IR 148": "cp1254",
    "ISO 2022 IR 149": "euc_kr",
    "ISO 2022 IR 159": "iso2022_jp",
    "ISO_IR 166": "cp874",
    "ISO 2022 IR 166": "cp874",
    "ISO 2022 IR 87": "iso2022_jp",
    "ISO 2022 IR 58": "gbk",
    "ISO_IR 192": "utf-8",
    "ISO_IR 196": "utf-8",
    "GB18030": "gb18030",
    "GBK": "gbk",
}

# Validate the table eagerly so a bad entry fails at import time.
for _name in set(_CODEC_NAMES.values()):
    codecs.lookup(_name)


@dataclass(frozen=True)
class CodingSystem:
    """Codecs used to turn DICOM bytes into text.

    A codec of ``None`` means the default, UTF-8.
    """

    alphabetic: str | None = None
    ideographic: str | None = None
    phonetic: str | None = None

    def decode(
        self, data: bytes, kind: CodingSystemType = CodingSystemType.IDEOGRAPHIC
    ) -> str:
        """Decode ``data`` with the codec for ``kind``; undecodable bytes become U+FFFD."""
        codec = {
            CodingSystemType.ALPHABETIC: self.alphabetic,
            CodingSystemType.IDEOGRAPHIC: self.ideographic,
            CodingSystemType.PHONETIC: self.phonetic,
        }[CodingSystemType(kind)]
        return bytes(data).decode(codec or "utf-8", errors="replace")


def parse_specific_character_set(encoding_names: Iterable[str]) -> CodingSystem:
    """Build a CodingSystem from Specific Character Set terms such as ``"ISO_IR 100"``.

    No terms give the default coding system. One term applies to all three
    parts; with two, the second covers ideographic and phonetic.
    """
    codecs_found: list[str] = []
    for name in encoding_names:
        try:
            codecs_found.append(_CODEC_NAMES[name])
        except KeyError:
            raise UnknownCharacterSetError(
                f"parse_specific_character_set: Unknown character set '{name}'. "
                "Assuming utf-8"
            ) from None

    if not codecs_found:
        return CodingSystem()
    if len(codecs_found) == 1:
        only = codecs_found[0]
        return CodingSystem(only, only, only)
    if len(codecs_found) == 2:
        first, second = codecs_found
        return CodingSystem(first, second, second)
    return CodingSystem(codecs_found[0], codecs_found[1], codecs_found[2])