"""Configuration constants for the romantic package.

This module contains the settings that define the numeral notation:
- The default alphabet (classical Roman numerals)
- The magnitude progression used to assign values to alphabet positions
- Defaults for decoding and for the CSV converter

There are no environment variables or configuration files; callers that
need a different notation pass their own alphabet to ``Roman``.
"""
from .integer_kinds import IntegerKind

# Classical Roman numerals, ordered from the smallest magnitude upwards.
# The largest representable number with this alphabet is 3999 (MMMCMXCIX).
DEFAULT_ALPHABET = ("I", "V", "X", "L", "C", "D", "M")

# Alphabet positions are consumed in groups of len(MAGNITUDE_VALUES).
# Within group g the symbols are worth value * MAGNITUDE_BASE ** g,
# giving 1, 5, 10, 50, 100, 500, 1000, ...
MAGNITUDE_VALUES = (1, 5)
MAGNITUDE_BASE = 10

# Decoding accumulates into a plain Python int unless a kind is requested
DEFAULT_INTEGER_KIND = IntegerKind.INT

# Appended to the input file stem when the CSV converter picks the output name
CONVERTED_CSV_SUFFIX = "_converted"
