"""Validation utilities for the romantic package.

This module provides reusable validation functions for codec inputs and
file system paths, ensuring consistent error handling across the codec, the
CSV converter and the command line interface.
"""
import numbers
from pathlib import Path
from typing import Annotated, Iterable, Tuple

from pydantic import StringConstraints, TypeAdapter

# A symbol is exactly one character; strict so that 1 is not coerced to "1"
Symbol = Annotated[str, StringConstraints(strict=True, min_length=1, max_length=1)]

_alphabet_adapter = TypeAdapter(Tuple[Symbol, ...])


def validate_alphabet(alphabet: Iterable[str]) -> Tuple[str, ...]:
    """Validate an alphabet and return it as a tuple of single characters.

    A plain string is split into its characters, so ``"IVXLCDM"`` and
    ``["I", "V", "X", "L", "C", "D", "M"]`` are equivalent. Duplicate
    symbols and empty alphabets are accepted here; their meaning is decided
    by the codec.

    Args:
        alphabet: String or iterable of one-character strings

    Returns:
        Tuple of the alphabet's symbols in their original order

    Raises:
        TypeError: If alphabet is not iterable
        pydantic.ValidationError: If any element is not a one-character string

    Example:
        >>> validate_alphabet("ABC")
        ('A', 'B', 'C')
    """
    return _alphabet_adapter.validate_python(tuple(alphabet))


def validate_number(number: numbers.Integral) -> int:
    """Validate that number is an integer and return it as a Python int.

    Any ``numbers.Integral`` is accepted, which includes the numpy integer
    types pandas produces. Booleans are rejected even though ``bool`` is a
    subclass of ``int``.

    Raises:
        TypeError: If number is not an integer
    """
    if isinstance(number, bool) or not isinstance(number, numbers.Integral):
        raise TypeError(f"Expected an integer, got {type(number).__name__}")
    return int(number)


def validate_csv_file(path: Path, name: str = "CSV file") -> None:
    """Validate that a path exists, is a file, and has .csv extension.

    Args:
        path: Path object to validate
        name: Descriptive name for the CSV file, used in error messages

    Raises:
        ValueError: If path does not exist, is not a file, or doesn't
                   have a .csv extension
    """
    if not path.is_file() or path.suffix != ".csv":
        raise ValueError(f"Error: {name} is not a valid CSV: {path}")
