"""Weighted multi-token staking: decimals, coins, locks, unlocks, store keys, addresses and proposals."""

__version__ = "0.1.0"

__all__ = [
    "address",
    "coin",
    "dec",
    "errors",
    "keys",
    "lock",
    "proposal",
    "unlock",
]