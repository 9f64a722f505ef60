# dicomkit

Small building blocks for working with DICOM values in Python:

- **Date, time and datetime values** (`DA`, `TM`, `DT`): parse them into
  standard `datetime` objects. The precision the value was stored with is
  kept, so the value can be written back in the same form.
- **Specific Character Set**: map DICOM character set terms to text codecs
  and decode byte strings with them.

## Installation

```
pip install dicomkit
```

The package has no runtime dependencies.

## Dates and times

```python
from dicomkit.dcm_date import parse_date
from dicomkit.dcm_time import parse_time
from dicomkit.dcm_datetime import parse_datetime

da = parse_date("202003")
print(da.time.month)        # 3
print(da.precision)         # MONTH
print(da.dcm())             # 202003
print(str(da))              # 2020-03

tm = parse_time("123001.431")
print(tm.precision)         # MS3
print(tm.dcm())             # 123001.431

dt = parse_datetime("20201210123001.000431+0100")
print(dt.no_offset)         # False
print(dt.dcm())             # 20201210123001.000431+0100
print(str(dt))              # 2020-12-10 12:30:01.000431 +01:00
```

The parsed objects are dataclasses:

- `Date(time, precision, is_nema)` in `dicomkit.dcm_date`
- `Time(time, precision)` in `dicomkit.dcm_time`
- `Datetime(time, precision, no_offset)` in `dicomkit.dcm_datetime`

Each has a `dcm()` method that gives the DICOM string, truncated to
`precision`. `str()` gives a readable form. You can also build these objects
yourself from any `datetime` and a `Precision`.

`Precision` (in `dicomkit.precision`) runs from `FULL` (most precise) through
`MS5` … `MS1`, `SECONDS`, `MINUTES`, `HOURS`, `DAY` and `MONTH` to `YEAR`.
Fields a value leaves out are filled with the lowest value: month 1, day 1,
and zero for the time fields. A parsed `TM` value is placed on 0001-01-01.

Legacy NEMA-300 dates such as `2020.03.04` are also accepted. The result has
`is_nema=True`, and `dcm()` writes it back with the dots. A `DT` value without
an offset gets a zero UTC offset and `no_offset=True`, and `dcm()` then leaves
the offset out.

A value that does not match its format raises `DateParseError`,
`TimeParseError` or `DatetimeParseError`. All three are subclasses of
`ValueError` and are found in `dicomkit.precision`.

## Character sets

```python
from dicomkit.charset import parse_specific_character_set, CodingSystemType

cs = parse_specific_character_set(["ISO_IR 100"])
print(cs.decode(b"Caf\xe9", CodingSystemType.ALPHABETIC))   # Café
```

`parse_specific_character_set` returns a `CodingSystem` with alphabetic,
ideographic and phonetic codecs:

- With no terms, every codec is the default, UTF-8.
- With one term, that codec is used for all three.
- With two terms, the first is alphabetic and the second covers the
  ideographic and phonetic codecs.
- With three terms, each codec gets its own term.

`decode` uses the ideographic codec by default and replaces bytes that cannot
be decoded with U+FFFD. An unknown term raises `UnknownCharacterSetError`,
which is a `ValueError`.

## What this package does not do

It does not read or write DICOM files. It has no model of data elements or
datasets, and it has no command-line tool. It works on single value strings
and byte strings that you have already taken out of a file.

## Running the tests

```
pip install -e ".[test]"
pytest
```