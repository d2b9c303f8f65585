"""Plain coins and weighted multi-staking coins."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from multistaking.dec import Dec

_DENOM_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9/:._-]{2,127}")


class CoinError(ValueError):
    """Raised for invalid coins and incompatible coin arithmetic."""


@dataclass(frozen=True)
class Coin:
    """A denomination and a non-negative integer amount."""

    denom: str
    amount: int

    def __post_init__(self) -> None:
        if not _DENOM_PATTERN.fullmatch(self.denom):
            raise CoinError(f"invalid denom: {self.denom}")
        if self.amount < 0:
            raise CoinError(f"negative coin amount: {self.amount}")

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


@dataclass(frozen=True)
class MultiStakingCoin:
    """A coin amount with the bond weight that converts it to bond tokens."""

    denom: str
    amount: int
    bond_weight: Dec

    def validate(self) -> None:
        if not self.bond_weight.is_positive():
            raise CoinError("weight zero or negative")

    def to_coin(self) -> Coin:
        return Coin(self.denom, self.amount)

    def bond_value(self) -> int:
        """The amount in bond tokens: weight times amount, truncated."""
        return self.bond_weight.mul_int(self.amount).truncate_int()

    def with_amount(self, amount: int) -> MultiStakingCoin:
        return replace(self, amount=amount)

    def safe_sub(self, other: MultiStakingCoin) -> MultiStakingCoin:
        """Subtract ``other``'s amount, keeping this coin's weight."""
        if self.denom != other.denom:
            raise CoinError("denom mismatch")
        amount = self.amount - other.amount
        if amount < 0:
            raise CoinError("insufficient amount")
        return self.with_amount(amount)

    def safe_add(self, other: MultiStakingCoin) -> MultiStakingCoin:
        """Add ``other``, giving the amount-weighted average bond weight."""
        if self.amount == 0:
            return other
        if self.denom != other.denom:
            raise CoinError("denom mismatch")
        amount = self.amount + other.amount
        weight = (
            self.bond_weight.mul_int(self.amount)
            .add(other.bond_weight.mul_int(other.amount))
            .quo_int(amount)
        )
        return MultiStakingCoin(self.denom, amount, weight)

    def add(self, other: MultiStakingCoin) -> MultiStakingCoin:
        return self.safe_add(other)