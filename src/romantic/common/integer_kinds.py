"""Integer kinds that decoded numerals can be accumulated into.

Python integers never overflow, so a fixed-width result is modelled by a
named range. Each kind knows its bounds and performs checked arithmetic,
raising instead of wrapping when a value leaves the range.
"""
from enum import Enum
from typing import Optional, Union

from .errors import ConversionOverflowError, GenericConversionError


class IntegerKind(Enum):
    """Supported output integer kinds, keyed by their conventional short names.

    Each member's value is ``(bits, signed)``. ``INT`` is the unbounded
    Python integer and never overflows.

    Example:
        >>> IntegerKind.I8.max_value
        127
        >>> IntegerKind.parse("u16").max_value
        65535
    """

    I8 = (8, True)
    I16 = (16, True)
    I32 = (32, True)
    I64 = (64, True)
    I128 = (128, True)
    U8 = (8, False)
    U16 = (16, False)
    U32 = (32, False)
    U64 = (64, False)
    U128 = (128, False)
    INT = (None, True)

    @property
    def bits(self) -> Optional[int]:
        return self.value[0]

    @property
    def signed(self) -> bool:
        return self.value[1]

    @property
    def zero(self) -> int:
        return 0

    @property
    def min_value(self) -> Optional[int]:
        """Smallest representable value, or None when unbounded."""
        if self.bits is None:
            return None
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> Optional[int]:
        """Largest representable value, or None when unbounded."""
        if self.bits is None:
            return None
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @classmethod
    def parse(cls, kind: Union["IntegerKind", str]) -> "IntegerKind":
        """Resolve a kind given either as a member or by name (case-insensitive).

        Raises:
            ValueError: If the name does not match any supported kind
        """
        if isinstance(kind, cls):
            return kind
        try:
            return cls[str(kind).strip().upper()]
        except KeyError:
            names = ", ".join(member.name.lower() for member in cls)
            raise ValueError(f"Unknown integer kind: {kind!r} (expected one of {names})") from None

    def contains(self, value: int) -> bool:
        """Check whether value fits in this kind."""
        if self.bits is None:
            return True
        return self.min_value <= value <= self.max_value

    def convert(self, value: int) -> int:
        """Represent value in this kind.

        Raises:
            GenericConversionError: If value is outside the kind's range
        """
        if not self.contains(value):
            raise GenericConversionError(value, self)
        return value

    def checked_add(self, lhs: int, rhs: int) -> int:
        """Add two values, raising ConversionOverflowError if the sum does not fit."""
        result = lhs + rhs
        if not self.contains(result):
            raise ConversionOverflowError()
        return result

    def checked_sub(self, lhs: int, rhs: int) -> int:
        """Subtract rhs from lhs, raising ConversionOverflowError if the difference does not fit."""
        result = lhs - rhs
        if not self.contains(result):
            raise ConversionOverflowError()
        return result
