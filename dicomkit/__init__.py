"""DICOM DA/TM/DT value parsing and Specific Character Set decoding."""

__version__ = "0.1.0"