"""Unlocking entries of one staker on one validator."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from multistaking.address import acc_address_from_bech32, val_address_from_bech32
from multistaking.coin import MultiStakingCoin
from multistaking.dec import Dec
from multistaking.errors import InvalidUnlockCreationHeightError
from multistaking.keys import UnlockID


@dataclass(frozen=True)
class UnlockEntry:
    """A weighted coin being unlocked, created at a block height."""

    creation_height: int
    unlocking_coin: MultiStakingCoin

    @property
    def bond_weight(self) -> Dec:
        return self.unlocking_coin.bond_weight

    def unbond_amount_to_unlock_amount(self, unbond_amount: int) -> int:
        """Convert bond tokens back into the entry's coin, truncated."""
        return Dec.from_int(unbond_amount).quo(self.bond_weight).truncate_int()

    def unlock_amount_to_unbond_amount(self, unlock_amount: int) -> int:
        """Convert an amount of the entry's coin into bond tokens, truncated."""
        return self.bond_weight.mul_int(unlock_amount).truncate_int()


@dataclass
class MultiStakingUnlock:
    """All unlocking entries of one staker on one validator."""

    unlock_id: UnlockID
    entries: list[UnlockEntry] = field(default_factory=list)

    def validate(self) -> None:
        """Raise if an address, a creation height or an entry's weight is invalid."""
        acc_address_from_bech32(self.unlock_id.multi_staker_addr)
        val_address_from_bech32(self.unlock_id.val_addr)
        for entry in self.entries:
            if entry.creation_height <= 0:
                raise InvalidUnlockCreationHeightError()
            entry.unlocking_coin.validate()

    def find_entry_index_by_height(self, creation_height: int) -> int | None:
        """Index of the entry created at ``creation_height``, or None."""
        return next(
            (
                index
                for index, entry in enumerate(self.entries)
                if entry.creation_height == creation_height
            ),
            None,
        )

    def add_entry(self, creation_height: int, coin: MultiStakingCoin) -> None:
        """Merge ``coin`` into the entry at that height, or append a new entry."""
        index = self.find_entry_index_by_height(creation_height)
        if index is None:
            self.entries.append(UnlockEntry(creation_height, coin))
            return
        entry = self.entries[index]
        self.entries[index] = replace(entry, unlocking_coin=entry.unlocking_coin.add(coin))

    def remove_coin_from_entry(self, entry_index: int, amount: int) -> None:
        """Reduce an entry by ``amount``, dropping the entry when it reaches zero."""
        if not 0 <= entry_index < len(self.entries):
            raise IndexError("entry index is out of bound")
        entry = self.entries[entry_index]
        if entry.unlocking_coin.amount < amount:
            raise ValueError("cancel amount is greater than the unlocking entry amount")
        remaining = entry.unlocking_coin.amount - amount
        if remaining == 0:
            self.remove_entry(entry_index)
        else:
            self.entries[entry_index] = replace(
                entry, unlocking_coin=entry.unlocking_coin.with_amount(remaining)
            )

    def remove_entry(self, index: int) -> None:
        del self.entries[index]

    def remove_entry_at_creation_height(self, creation_height: int) -> None:
        index = self.find_entry_index_by_height(creation_height)
        if index is not None:
            self.remove_entry(index)

    def __str__(self) -> str:
        out = (
            f"Unlock ID: {self.unlock_id.multi_staker_addr} {self.unlock_id.val_addr}\n"
            "\tEntries:"
        )
        for index, entry in enumerate(self.entries):
            out += (
                f"    Unbonding Delegation {index}:\n"
                f"      Creation Height:           {entry.creation_height}\n     "
            )
        return out


def new_multi_staking_unlock(
    unlock_id: UnlockID, creation_height: int, coin: MultiStakingCoin
) -> MultiStakingUnlock:
    """An unlock holding a single entry."""
    return MultiStakingUnlock(unlock_id, [UnlockEntry(creation_height, coin)])