"""Registered errors of the multi-staking module."""

from __future__ import annotations

CODESPACE = "multistaking"


class MultiStakingError(Exception):
    """Base class of the module's registered errors.

    Each subclass carries a fixed ``code`` and ``description``.  An optional
    detail is prefixed to the description, as a wrapped error would be.
    """

    codespace: str = CODESPACE
    code: int = 1
    description: str = "multi-staking error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = f"{detail}: {self.description}" if detail else self.description
        super().__init__(message)


class InvalidAddMultiStakingCoinProposalError(MultiStakingError):
    code = 2
    description = "invalid add multi staking coin proposal"


class InvalidUpdateBondWeightProposalError(MultiStakingError):
    code = 3
    description = "invalid update bond weight proposal"


class InvalidTotalMultiStakingLocksError(MultiStakingError):
    code = 4
    description = "invalid total multi-staking lock"


class InvalidTotalMultiStakingUnlocksError(MultiStakingError):
    code = 5
    description = "invalid total multi-staking unlock"


class InvalidUnlockCreationHeightError(MultiStakingError):
    code = 6
    description = "invalid unlock creation height"