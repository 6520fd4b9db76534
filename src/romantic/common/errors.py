"""Exceptions raised by the numeral codec.

Every failure the codec can report derives from ``ConversionError``, which is
itself a ``ValueError`` so callers that already guard conversions with
``except ValueError`` keep working.
"""


class ConversionError(ValueError):
    """Base class for all errors that can occur during conversion."""


class GenericConversionError(ConversionError):
    """A magnitude from the table cannot be represented in the requested integer kind."""

    def __init__(self, value: int, kind):
        self.value = value
        self.kind = kind
        super().__init__("Conversion error with generic integer")


class InvalidCharacterError(ConversionError):
    """An input character has no magnitude in the alphabet."""

    def __init__(self, character: str):
        self.character = character
        super().__init__(f'Invalid character "{character}" encountered')


class MissingMagnitudeError(ConversionError):
    """A magnitude needed for the input number has no character in the alphabet."""

    def __init__(self, magnitude: int):
        self.magnitude = magnitude
        super().__init__(f'Missing magnitude "{magnitude}" for input number')


class NegativeNumberError(ConversionError):
    """The number passed to encode is negative."""

    def __init__(self, number: int):
        self.number = number
        super().__init__("Input number cannot be negative")


class ConversionOverflowError(ConversionError, OverflowError):
    """Accumulating a decoded value left the range of the requested integer kind."""

    def __init__(self):
        super().__init__("Operation would cause overflow")
