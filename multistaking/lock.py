"""Locked multi-staking coins of one staker on one validator."""

from __future__ import annotations

from dataclasses import dataclass

from multistaking.address import acc_address_from_bech32, val_address_from_bech32
from multistaking.coin import MultiStakingCoin
from multistaking.dec import Dec
from multistaking.keys import LockID


@dataclass
class MultiStakingLock:
    """The weighted coin a staker has locked with a validator."""

    lock_id: LockID
    locked_coin: MultiStakingCoin

    def validate(self) -> None:
        """Raise if an address is malformed or the locked coin's weight is not positive."""
        acc_address_from_bech32(self.lock_id.multi_staker_addr)
        val_address_from_bech32(self.lock_id.val_addr)
        self.locked_coin.validate()

    @property
    def bond_weight(self) -> Dec:
        return self.locked_coin.bond_weight

    def multi_staking_coin(self, amount: int) -> MultiStakingCoin:
        """The locked coin's denomination and weight with another amount."""
        return self.locked_coin.with_amount(amount)

    def remove_coin(self, coin: MultiStakingCoin) -> None:
        """Take ``coin`` out of the lock; raises CoinError if impossible."""
        self.locked_coin = self.locked_coin.safe_sub(coin)

    def add_coin(self, coin: MultiStakingCoin) -> None:
        """Put ``coin`` into the lock, averaging the bond weight."""
        self.locked_coin = self.locked_coin.safe_add(coin)

    def is_empty(self) -> bool:
        return self.locked_coin.amount == 0

    def locked_amount_to_bond_amount(self, amount: int) -> int:
        """Convert a locked amount into bond tokens at the lock's weight."""
        return self.locked_coin.with_amount(amount).bond_value()

    def move_coin_to_lock(self, to_lock: MultiStakingLock, coin: MultiStakingCoin) -> None:
        """Remove ``coin`` from this lock and add it to ``to_lock``."""
        self.remove_coin(coin)
        to_lock.add_coin(coin)