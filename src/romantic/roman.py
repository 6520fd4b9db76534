"""Roman numeral conversion with a configurable alphabet.

This module provides bidirectional conversion between non-negative integers
and Roman-style numerals. The classical numerals (I, V, X, L, C, D, M) are
just the default alphabet: any ordered set of characters can be used, and
the order of the characters determines their value.

    | Index | Magnitude | Character |
    |-------|-----------|-----------|
    | 0     | 1         | 'I'       |
    | 1     | 5         | 'V'       |
    | 2     | 10        | 'X'       |
    | 3     | 50        | 'L'       |
    | 4     | 100       | 'C'       |
    | 5     | 500       | 'D'       |
    | 6     | 1000      | 'M'       |
    | ...   | ...       | ...       |
"""
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple, Union

from .common.config import DEFAULT_ALPHABET, DEFAULT_INTEGER_KIND, MAGNITUDE_BASE, MAGNITUDE_VALUES
from .common.errors import InvalidCharacterError, MissingMagnitudeError, NegativeNumberError
from .common.integer_kinds import IntegerKind
from .common.validators import validate_alphabet, validate_number


class Roman:
    """Numeral codec for a single alphabet.

    The codec builds two lookup tables when it is created (character to
    magnitude and magnitude to character) and never changes them afterwards,
    so one instance can be shared freely, including between threads.

    Attributes:
        alphabet: The characters the codec was built from, in order
        symbol_magnitudes: Read-only mapping of character to magnitude
        magnitude_symbols: Read-only mapping of magnitude to character

    Example:
        >>> roman = Roman.default()
        >>> roman.encode(2022)
        'MMXXII'
        >>> roman.decode("MMXXII")
        2022
        >>> custom = Roman(["A", "B"])  # A equals 1 and B equals 5
        >>> custom.encode(6)
        'BA'
    """

    def __init__(self, alphabet: Iterable[str]):
        """Build the magnitude tables for alphabet.

        Characters are consumed in pairs; the n-th pair is worth 1 * 10**n
        and 5 * 10**n. An alphabet of odd length therefore has no "five"
        character for its last magnitude. A repeated character keeps the
        magnitude of its last occurrence.

        Args:
            alphabet: String or iterable of one-character strings, from
                      smallest to largest magnitude. May be empty, in which
                      case only zero can be represented.

        Raises:
            pydantic.ValidationError: If an element is not a single character
        """
        self._alphabet = validate_alphabet(alphabet)
        self._symbol_magnitudes: Dict[str, int] = {}
        self._magnitude_symbols: Dict[int, str] = {}
        self._build_tables()

    @classmethod
    def default(cls) -> "Roman":
        """Create a codec for the classical Roman numerals (maximum 3999)."""
        return cls(DEFAULT_ALPHABET)

    def _build_tables(self):
        modulo = len(MAGNITUDE_VALUES)
        scale = 1

        for index, character in enumerate(self._alphabet):
            if index > 0 and index % modulo == 0:
                scale *= MAGNITUDE_BASE

            magnitude = scale * MAGNITUDE_VALUES[index % modulo]
            self._symbol_magnitudes[character] = magnitude
            self._magnitude_symbols[magnitude] = character

    @property
    def alphabet(self) -> Tuple[str, ...]:
        return self._alphabet

    @property
    def symbol_magnitudes(self) -> Mapping[str, int]:
        return MappingProxyType(self._symbol_magnitudes)

    @property
    def magnitude_symbols(self) -> Mapping[int, str]:
        return MappingProxyType(self._magnitude_symbols)

    def __eq__(self, other):
        if not isinstance(other, Roman):
            return NotImplemented
        return (self._symbol_magnitudes == other._symbol_magnitudes
                and self._magnitude_symbols == other._magnitude_symbols)

    def __hash__(self):
        return hash(frozenset(self._symbol_magnitudes.items()))

    def __repr__(self):
        return f"Roman({''.join(self._alphabet)!r})"

    def decode(self, text: str, kind: Union[IntegerKind, str] = DEFAULT_INTEGER_KIND) -> int:
        """Convert a numeral string to an integer.

        The string is read left to right. A character is subtracted when the
        next character is worth exactly five or ten times as much (IV, IX,
        XL, XC, CD, CM for the default alphabet) and added otherwise. The
        string is not checked for canonical form, so "IIII" decodes to 4.
        Whitespace and letter case are significant.

        Args:
            text: Numeral string (e.g., "MMXXII")
            kind: Integer kind to accumulate in, as an IntegerKind or its
                  name (e.g., "i32", "u8"). Defaults to an unbounded int.

        Returns:
            Integer value of the numeral; 0 for an empty string

        Raises:
            InvalidCharacterError: If a character is not in the alphabet
            GenericConversionError: If a character's magnitude does not fit in kind
            ConversionOverflowError: If the running total leaves kind's range

        Examples:
            >>> Roman.default().decode("IX")
            9
            >>> Roman("ABC").decode("AC")
            9
        """
        kind = IntegerKind.parse(kind)
        result = kind.zero

        for index, character in enumerate(text):
            magnitude = self._symbol_magnitudes.get(character)
            if magnitude is None:
                raise InvalidCharacterError(character)

            value = kind.convert(magnitude)

            # An unknown next character is reported on its own iteration
            subtract = False
            if index + 1 < len(text):
                next_magnitude = self._symbol_magnitudes.get(text[index + 1])
                subtract = next_magnitude in (magnitude * 5, magnitude * 10)

            if subtract:
                result = kind.checked_sub(result, value)
            else:
                result = kind.checked_add(result, value)

        return result

    def _symbol(self, magnitude: int) -> str:
        try:
            return self._magnitude_symbols[magnitude]
        except KeyError:
            raise MissingMagnitudeError(magnitude) from None

    def encode(self, number: int) -> str:
        """Convert a non-negative integer to a numeral string.

        Digits are converted from the units upwards. Characters are only
        looked up when a digit needs them, so an alphabet can represent every
        number up to the first one that needs a missing magnitude: the
        default alphabet handles 3999 but not 4000, which would need a
        character worth 5000.

        Args:
            number: Non-negative integer; any integral type is accepted

        Returns:
            Numeral string, most significant character first; "" for 0

        Raises:
            TypeError: If number is not an integer
            NegativeNumberError: If number is negative
            MissingMagnitudeError: If a needed magnitude has no character

        Examples:
            >>> Roman.default().encode(9)
            'IX'
            >>> Roman("ABC").encode(9)
            'AC'
        """
        number = validate_number(number)
        if number < 0:
            raise NegativeNumberError(number)

        digits = []

        for position, digit in enumerate(reversed(str(number))):
            digit = int(digit)
            if digit == 0:
                continue

            magnitude = MAGNITUDE_BASE ** position

            # Using magnitude 1 as examples
            if digit <= 3:
                # I, II, III
                digits.append(self._symbol(magnitude) * digit)
            elif digit == 4:
                # IV
                five = self._symbol(magnitude * 5)
                digits.append(self._symbol(magnitude) + five)
            elif digit == 5:
                # V
                digits.append(self._symbol(magnitude * 5))
            elif digit <= 8:
                # VI, VII, VIII
                units = self._symbol(magnitude) * (digit - 5)
                digits.append(self._symbol(magnitude * 5) + units)
            else:
                # IX
                ten = self._symbol(magnitude * 10)
                digits.append(self._symbol(magnitude) + ten)

        return "".join(reversed(digits))


_default_roman = Roman.default()


def convert_int_to_roman(num: int) -> str:
    """Convert an integer to a classical Roman numeral string.

    Examples:
        >>> convert_int_to_roman(14)
        'XIV'
        >>> convert_int_to_roman(1994)
        'MCMXCIV'
    """
    return _default_roman.encode(num)


def convert_roman_to_int(roman: str) -> int:
    """Convert a classical Roman numeral string to an integer.

    Examples:
        >>> convert_roman_to_int("XIV")
        14
        >>> convert_roman_to_int("MCMXCIV")
        1994
    """
    return _default_roman.decode(roman)
