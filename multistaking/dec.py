"""Fixed-point decimal with 18 digits of precision."""

from __future__ import annotations

import re
from dataclasses import dataclass

PRECISION = 18
_ONE = 10**PRECISION
_HALF = _ONE // 2
_MAX_BIT_LEN = 256 + 60
_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?")


def _div_trunc(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _chop_and_round(value: int) -> int:
    if value < 0:
        return -_chop_and_round(-value)
    quotient, remainder = divmod(value, _ONE)
    if remainder < _HALF:
        return quotient
    if remainder > _HALF:
        return quotient + 1
    return quotient if quotient % 2 == 0 else quotient + 1


def _checked(value: int) -> int:
    if value.bit_length() > _MAX_BIT_LEN:
        raise OverflowError("decimal out of range")
    return value


@dataclass(frozen=True, order=True)
class Dec:
    """A signed decimal stored as an integer scaled by 10**18."""

    scaled: int

    def __post_init__(self) -> None:
        _checked(self.scaled)

    @classmethod
    def from_str(cls, text: str) -> Dec:
        if not _PATTERN.fullmatch(text):
            raise ValueError(f"invalid decimal string: {text!r}")
        negative = text.startswith("-")
        integer, _, fraction = text.lstrip("-").partition(".")
        if len(fraction) > PRECISION:
            raise ValueError(
                f"invalid precision; max: {PRECISION}, got: {len(fraction)}"
            )
        magnitude = int(integer + fraction.ljust(PRECISION, "0"))
        return cls(-magnitude if negative else magnitude)

    @classmethod
    def from_int(cls, value: int) -> Dec:
        return cls(_checked(value * _ONE))

    @classmethod
    def zero(cls) -> Dec:
        return cls(0)

    @classmethod
    def one(cls) -> Dec:
        return cls(_ONE)

    def add(self, other: Dec) -> Dec:
        return Dec(self.scaled + other.scaled)

    def sub(self, other: Dec) -> Dec:
        return Dec(self.scaled - other.scaled)

    def mul_int(self, value: int) -> Dec:
        return Dec(_checked(self.scaled * value))

    def quo_int(self, value: int) -> Dec:
        """Divide by an integer, truncating toward zero."""
        return Dec(_div_trunc(self.scaled, value))

    def quo(self, other: Dec) -> Dec:
        """Divide by another decimal, rounding half to even at the last digit."""
        quotient = _div_trunc(self.scaled * _ONE * _ONE, other.scaled)
        return Dec(_checked(_chop_and_round(quotient)))

    def truncate_int(self) -> int:
        """The integer part, truncated toward zero."""
        return _div_trunc(self.scaled, _ONE)

    def is_positive(self) -> bool:
        return self.scaled > 0

    def is_zero(self) -> bool:
        return self.scaled == 0

    def is_negative(self) -> bool:
        return self.scaled < 0

    __add__ = add
    __sub__ = sub

    def __str__(self) -> str:
        sign = "-" if self.scaled < 0 else ""
        integer, fraction = divmod(abs(self.scaled), _ONE)
        return f"{sign}{integer}.{fraction:0{PRECISION}d}"