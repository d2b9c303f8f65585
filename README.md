# multistaking

Bookkeeping types for staking with several tokens at once. Each token carries
a *bond weight*. The bond weight converts the locked amount of that token into
bond value. The package has no dependencies outside the standard library.

## Modules

- `multistaking.dec`: `Dec` is a signed fixed-point decimal with 18
  fractional digits. It provides `from_str`, `from_int`, `zero`, `one`,
  `add`, `sub`, `mul_int`, `quo_int` (truncates), `quo` (rounds half to even)
  and `truncate_int`. `str(Dec)` always prints 18 fractional digits.
- `multistaking.coin`: `Coin` is a plain denom and amount. It checks the
  denom format and rejects negative amounts. `MultiStakingCoin` is a denom, an
  integer amount and a `Dec` bond weight. Its methods are `validate`,
  `to_coin`, `bond_value`, `with_amount`, `safe_sub`, and
  `safe_add`/`add`. Adding two coins of the same denom gives the
  amount-weighted average of their bond weights. Subtracting keeps the
  original weight.
- `multistaking.lock`: `MultiStakingLock` holds the coin that one staker has
  locked with one validator. Its methods are `add_coin`, `remove_coin`,
  `move_coin_to_lock`, `is_empty`, `locked_amount_to_bond_amount`,
  `multi_staking_coin` and `validate`.
- `multistaking.unlock`: `UnlockEntry` and `MultiStakingUnlock` keep unlocking
  entries by creation height. Their methods are `add_entry` (merges into an
  entry at the same height), `find_entry_index_by_height` (returns `None` when
  there is no entry at that height), `remove_coin_from_entry`, `remove_entry`,
  `remove_entry_at_creation_height` and `validate`.
  `new_multi_staking_unlock` builds an unlock with a single entry.
- `multistaking.keys`: module names, store-key prefixes and event names.
  It has `LockID`/`UnlockID` with `to_bytes()`, plus `bond_weight_key`,
  `validator_multi_staking_coin_key`, `key_prefix`, `addresses_from_lock_id`
  and `addresses_from_unlock_id`.
- `multistaking.proposal`: `AddMultiStakingCoinProposal` and
  `UpdateBondWeightProposal` with `proposal_route`, `proposal_type` and
  `validate_basic`.
- `multistaking.address`: bech32 `bech32_encode`/`bech32_decode` and helpers
  that convert account addresses (prefix `cosmos`) and validator addresses
  (prefix `cosmosvaloper`) to and from raw bytes.
- `multistaking.errors`: `MultiStakingError` and its coded subclasses.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from multistaking.coin import MultiStakingCoin
from multistaking.dec import Dec

a = MultiStakingCoin("ario", 100000, Dec.one())
b = MultiStakingCoin("ario", 200000, Dec.from_str("0.25"))

total = a.safe_add(b)
print(total.amount)        # 300000
print(total.bond_weight)   # 0.500000000000000000
print(total.bond_value())  # 150000
```

## Errors

Every failure raises an exception:

- `CoinError` for a denom mismatch, an amount that is too small, or a weight
  that is zero or negative.
- `AddressError` for a malformed bech32 string or an address with the wrong
  prefix.
- `InvalidUnlockCreationHeightError` when `MultiStakingUnlock.validate()`
  finds a creation height that is not positive.
- From `remove_coin_from_entry`: `IndexError` for an index out of range, and
  `ValueError` for an amount larger than the entry.
- From a proposal's `validate_basic()`: `ProposalError` for a blank or
  over-long title or description. For a blank denom or a bond weight that is
  not positive it raises `InvalidAddMultiStakingCoinProposalError` or
  `InvalidUpdateBondWeightProposalError`.

## What it does not do

The package only provides the types and their arithmetic. It has no key-value
store and no keeper that reads or writes locks and unlocks. It does not
process transactions or proposals, and it does not validate genesis state. It
has no wire encoding beyond the store-key bytes.