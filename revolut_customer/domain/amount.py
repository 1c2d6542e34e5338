"""
Amount Domain Model - Fixed-point currency amount.

An amount is stored as a non-negative integer number of hundredths, so an
internal representation of 100 is an external amount of 1. The JSON API
sends amounts as that internal integer.

    amount = Amount.parse("175.64")
    amount.repr                 # 17564
    str(amount)                 # "175.64"
    format(amount, ".1")        # "175.6"
    amount * 2                  # Amount.from_repr(35128)
"""

import re
from functools import total_ordering
from typing import Any

from revolut_customer.errors import AmountParseError

MAX_REPR = 2 ** 64 - 1
MIN_REPR = 0

_DIGITS = re.compile(r"[0-9]+")
_FORMAT_SPEC = re.compile(r"0?(?P<width>[0-9]+)?(?:\.(?P<precision>[0-9]+))?")


def _check_range(value: int) -> int:
    if not MIN_REPR <= value <= MAX_REPR:
        raise OverflowError(f"amount representation {value} out of range")
    return value


def _as_int(other: Any) -> int:
    if isinstance(other, bool) or not isinstance(other, int):
        raise TypeError(f"expected a non-negative integer, got {other!r}")
    if other < 0:
        raise ValueError(f"expected a non-negative integer, got {other}")
    return other


@total_ordering
class Amount:
    """
    Currency amount.

    Amounts can be added to and subtracted from other amounts, and
    multiplied, divided or reduced modulo a plain integer. Negative amounts
    cannot exist: an operation that would leave the valid range raises
    OverflowError.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        self._value = _check_range(_as_int(value))

    @classmethod
    def _checked(cls, value: int) -> "Amount":
        # Result of arithmetic on valid amounts, only the range can be off
        amount = cls.__new__(cls)
        amount._value = _check_range(value)
        return amount

    @classmethod
    def from_repr(cls, value: int) -> "Amount":
        """Create an amount from its internal representation."""
        return cls(value)

    @property
    def repr(self) -> int:
        """Internal representation (hundredths)."""
        return self._value

    @classmethod
    def min_value(cls) -> "Amount":
        """Smallest amount that can be represented."""
        return cls(MIN_REPR)

    @classmethod
    def max_value(cls) -> "Amount":
        """Largest amount that can be represented."""
        return cls(MAX_REPR)

    @classmethod
    def parse(cls, text: str) -> "Amount":
        """
        Parse a decimal string.

        Decimals beyond the second are rounded half up, so "0.005" is one
        hundredth and "0.0049" is zero.

        Raises:
            AmountParseError: If text is not a valid amount
        """
        if "." not in text:
            if not _DIGITS.fullmatch(text):
                raise AmountParseError(text)
            units = int(text)
            if units > MAX_REPR // 100:
                raise AmountParseError(text)
            return cls(units * 100)

        parts = text.split(".")
        if len(parts) != 2:
            raise AmountParseError(text)
        units_str, decimals_str = parts

        if units_str:
            if not _DIGITS.fullmatch(units_str):
                raise AmountParseError(text)
            units = int(units_str)
            if units > MAX_REPR // 100:
                raise AmountParseError(text)
            units *= 100
        else:
            units = 0

        if not decimals_str or not _DIGITS.fullmatch(decimals_str):
            raise AmountParseError(text)
        if len(decimals_str) == 1:
            decimals_str += "0"

        decimals = int(decimals_str)
        if len(decimals_str) > 2:
            divisor = 10 ** (len(decimals_str) - 2)
            decimals, rem = divmod(decimals, divisor)
            if rem * 2 >= divisor:
                decimals += 1

        if MAX_REPR - decimals < units:
            raise AmountParseError(text)
        return cls(units + decimals)

    # Arithmetic

    def __add__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        return Amount._checked(self._value + other._value)

    def __sub__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        return Amount._checked(self._value - other._value)

    def __mul__(self, other: int) -> "Amount":
        if isinstance(other, Amount):
            return NotImplemented
        return Amount._checked(self._value * _as_int(other))

    __rmul__ = __mul__

    def __floordiv__(self, other: int) -> "Amount":
        if isinstance(other, Amount):
            return NotImplemented
        return Amount._checked(self._value // _as_int(other))

    # Division always truncates to the hundredth
    __truediv__ = __floordiv__

    def __mod__(self, other: int) -> "Amount":
        if isinstance(other, Amount):
            return NotImplemented
        return Amount._checked(self._value % (_as_int(other) * 100))

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: "Amount") -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    # Display

    def __repr__(self) -> str:
        return f"Amount({self})"

    def __str__(self) -> str:
        units, hundredths = divmod(self._value, 100)
        if hundredths == 0:
            return str(units)
        if hundredths % 10 == 0:
            return f"{units}.{hundredths // 10}"
        return f"{units}.{hundredths:02d}"

    def __format__(self, spec: str) -> str:
        match = _FORMAT_SPEC.fullmatch(spec)
        if match is None:
            raise ValueError(f"invalid format specifier {spec!r} for Amount")

        precision = match.group("precision")
        if precision is None:
            result = str(self)
        else:
            precision = int(precision)
            if precision == 0:
                result = str((self._value + 50) // 100)
            elif precision == 1:
                tenths = (self._value + 5) // 10
                result = f"{tenths // 10}.{tenths % 10}"
            else:
                units, hundredths = divmod(self._value, 100)
                result = f"{units}.{hundredths:02d}" + "0" * (precision - 2)

        width = match.group("width")
        if width is not None:
            result = result.rjust(int(width), "0")
        return result

    # Serialization

    def to_json(self) -> int:
        """Wire representation."""
        return self._value

    @classmethod
    def from_json(cls, value: Any) -> "Amount":
        """
        Build an amount from its wire representation.

        Raises:
            ValueError: If value is not an integer in the valid range
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"amount must be an integer number of hundredths, got {value!r}")
        try:
            return cls(value)
        except OverflowError as exc:
            raise ValueError(str(exc)) from exc


MAX = Amount.max_value()
MIN = Amount.min_value()
