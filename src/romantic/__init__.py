"""Bidirectional conversion between integers and Roman-style numerals."""
from .common.errors import (
    ConversionError,
    ConversionOverflowError,
    GenericConversionError,
    InvalidCharacterError,
    MissingMagnitudeError,
    NegativeNumberError,
)
from .common.integer_kinds import IntegerKind
from .convert_csv import convert_csv_column
from .roman import Roman, convert_int_to_roman, convert_roman_to_int

__all__ = [
    "ConversionError",
    "ConversionOverflowError",
    "GenericConversionError",
    "IntegerKind",
    "InvalidCharacterError",
    "MissingMagnitudeError",
    "NegativeNumberError",
    "Roman",
    "convert_csv_column",
    "convert_int_to_roman",
    "convert_roman_to_int",
]
