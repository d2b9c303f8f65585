"""Store keys, lock identifiers and event names of the module."""

from __future__ import annotations

from dataclasses import dataclass

from multistaking.address import acc_and_val_addresses_from_strings

MODULE_NAME = "multistaking"
STORE_KEY = MODULE_NAME
ROUTER_KEY = MODULE_NAME
QUERIER_ROUTE = MODULE_NAME

BOND_WEIGHT_KEY = b"\x00"
VALIDATOR_MULTI_STAKING_COIN_KEY = b"\x01"
MULTI_STAKING_LOCK_PREFIX = b"\x02"
MULTI_STAKING_UNLOCK_PREFIX = b"\x11"
PARAMS_KEY = b"\x03"

EVENT_TYPE_ADD_MULTI_STAKING_COIN = "add_multi_staking_coin"
EVENT_TYPE_UPDATE_BOND_WEIGHT = "update_bond_weight"
ATTRIBUTE_KEY_DENOM = "denom"
ATTRIBUTE_KEY_BOND_WEIGHT = "bond_weight"


def key_prefix(key: str) -> bytes:
    return key.encode()


def bond_weight_key(denom: str) -> bytes:
    """Key of the bond weight stored for a denomination."""
    return BOND_WEIGHT_KEY + denom.encode()


def validator_multi_staking_coin_key(val_address: bytes) -> bytes:
    """Key of the multi-staking denomination of a validator."""
    return VALIDATOR_MULTI_STAKING_COIN_KEY + bytes(val_address)


def _pair_key(prefix: bytes, multi_staker_addr: str, val_addr: str) -> bytes:
    staker, validator = acc_and_val_addresses_from_strings(multi_staker_addr, val_addr)
    return prefix + bytes([len(staker) & 0xFF]) + staker + validator


def _split_pair_key(key: bytes) -> tuple[bytes, bytes]:
    if len(key) < 2:
        raise ValueError("key too short")
    length = key[1]
    if len(key) < 2 + length:
        raise ValueError("key shorter than its address length prefix")
    return bytes(key[2:2 + length]), bytes(key[2 + length:])


@dataclass(frozen=True)
class LockID:
    """Identifies the lock of one staker on one validator."""

    multi_staker_addr: str
    val_addr: str

    def to_bytes(self) -> bytes:
        return _pair_key(MULTI_STAKING_LOCK_PREFIX, self.multi_staker_addr, self.val_addr)


@dataclass(frozen=True)
class UnlockID:
    """Identifies the unlock of one staker on one validator."""

    multi_staker_addr: str
    val_addr: str

    def to_bytes(self) -> bytes:
        return _pair_key(MULTI_STAKING_UNLOCK_PREFIX, self.multi_staker_addr, self.val_addr)


def multi_staking_lock_id(multi_staker_addr: str, val_addr: str) -> LockID:
    return LockID(multi_staker_addr, val_addr)


def multi_staking_unlock_id(multi_staker_addr: str, val_addr: str) -> UnlockID:
    return UnlockID(multi_staker_addr, val_addr)


def addresses_from_lock_id(lock_id: bytes) -> tuple[bytes, bytes]:
    """Split a lock key into the raw staker and validator addresses."""
    return _split_pair_key(lock_id)


def addresses_from_unlock_id(unlock_id: bytes) -> tuple[bytes, bytes]:
    """Split an unlock key into the raw staker and validator addresses."""
    return _split_pair_key(unlock_id)