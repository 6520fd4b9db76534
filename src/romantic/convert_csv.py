"""Convert a CSV column between integers and numerals.

This module applies the codec to a whole column of a CSV file, for example
to turn subquestion numbers (1, 2, 3) into numerals (I, II, III) before a
file is shared, and back again when it is read in.
"""
import pandas as pd
from pathlib import Path
from typing import Iterable, Optional, Union

from .common.config import CONVERTED_CSV_SUFFIX, DEFAULT_ALPHABET, DEFAULT_INTEGER_KIND
from .common.integer_kinds import IntegerKind
from .common.progress import ProgressPrinter
from .common.validators import validate_csv_file
from .roman import Roman

TARGETS = ("roman", "int")


def _parse_integer(value: str) -> int:
    """Parse a cell as an integer, accepting whole-number floats such as "2.0".

    pandas writes integer columns with empty cells as floats, so "1.0" is a
    valid subquestion number while "1.5" is not.

    Raises:
        ValueError: If the cell is not numeric or not a whole number
    """
    number = pd.to_numeric(value)
    if isinstance(number, float):
        if not number.is_integer():
            raise ValueError(f"Expected a whole number, got {value}")
        return int(number)
    return number


def convert_csv_column(
    csv_path: str,
    column: str,
    to: str,
    output_path: Optional[str] = None,
    alphabet: Optional[Iterable[str]] = None,
    kind: Union[IntegerKind, str] = DEFAULT_INTEGER_KIND,
) -> Path:
    """Convert every value in one column of a CSV file and save the result.

    Args:
        csv_path: Path to the input CSV file
        column: Name of the column to convert
        to: "roman" to encode integers as numerals, "int" to decode numerals
        output_path: Where to write the converted file. Defaults to
                     "<stem>_converted.csv" next to the input file.
        alphabet: Alphabet to use; defaults to the classical Roman numerals
        kind: Integer kind used when decoding (see IntegerKind)

    Returns:
        Path: Path to the written CSV file

    Raises:
        ValueError: If the input is not a CSV file, the column is missing,
                    the target is unknown, or any value fails to convert.
                    Nothing is written when a value fails.

    Note:
        Empty cells are left empty. All other columns are copied unchanged.
    """
    csv_path = Path(csv_path)
    validate_csv_file(csv_path, "Input CSV")

    if to not in TARGETS:
        raise ValueError(f"Unknown conversion target: {to!r} (expected one of {', '.join(TARGETS)})")

    roman = Roman(alphabet if alphabet is not None else DEFAULT_ALPHABET)
    kind = IntegerKind.parse(kind)

    # Read everything as text so untouched columns are written back verbatim
    df = pd.read_csv(csv_path, dtype=str)
    if column not in df.columns:
        raise ValueError(f"Column {column!r} not found in {csv_path.name}. Available columns: {list(df.columns)}")

    converted = []
    progress = ProgressPrinter(f"Converting {column}", len(df))

    for i, value in enumerate(df[column]):
        progress.update(i + 1)

        if pd.isna(value):
            converted.append(None)
            continue

        try:
            if to == "roman":
                converted.append(roman.encode(_parse_integer(value)))
            else:
                converted.append(roman.decode(value, kind))
        except (ValueError, TypeError) as e:
            raise ValueError(f"Row {i + 1}: cannot convert {value!r}: {e}") from e

    progress.done()

    df[column] = pd.Series(converted, index=df.index, dtype=object)

    if output_path is None:
        output_path = csv_path.with_name(f"{csv_path.stem}{CONVERTED_CSV_SUFFIX}.csv")
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df.to_csv(output_path, index=False)
    print(f"Converted {len(df)} rows of {column!r} to {to}: {output_path}")

    return output_path
