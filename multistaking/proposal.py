"""Governance proposals that add a multi-staking coin or change its weight."""

from __future__ import annotations

from dataclasses import dataclass

from multistaking.dec import Dec
from multistaking.errors import (
    InvalidAddMultiStakingCoinProposalError,
    InvalidUpdateBondWeightProposalError,
)
from multistaking.keys import ROUTER_KEY

PROPOSAL_TYPE_ADD_MULTI_STAKING_COIN = "AddMultiStakingCoin"
PROPOSAL_TYPE_UPDATE_BOND_WEIGHT = "UpdateBondWeight"

MAX_TITLE_LENGTH = 140
MAX_DESCRIPTION_LENGTH = 10000


class ProposalError(ValueError):
    """Raised when a proposal's title or description is invalid."""


def _validate_abstract(title: str, description: str) -> None:
    if not title.strip():
        raise ProposalError("proposal title cannot be blank")
    if len(title) > MAX_TITLE_LENGTH:
        raise ProposalError(
            f"proposal title is longer than max length of {MAX_TITLE_LENGTH}"
        )
    if not description.strip():
        raise ProposalError("proposal description cannot be blank")
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise ProposalError(
            f"proposal description is longer than max length of {MAX_DESCRIPTION_LENGTH}"
        )


def _validate_denom_and_weight(denom: str, weight: Dec | None, error: type) -> None:
    if not denom:
        raise error("proposal bond token cannot be blank")
    if weight is None or not weight.is_positive():
        raise error("proposal bond token weight must be positive")


@dataclass
class AddMultiStakingCoinProposal:
    """Proposes a new denomination for multi-staking with its bond weight."""

    title: str
    description: str
    denom: str
    bond_weight: Dec | None

    def proposal_route(self) -> str:
        return ROUTER_KEY

    def proposal_type(self) -> str:
        return PROPOSAL_TYPE_ADD_MULTI_STAKING_COIN

    def validate_basic(self) -> None:
        """Run stateless checks, raising on the first failure."""
        _validate_abstract(self.title, self.description)
        _validate_denom_and_weight(
            self.denom, self.bond_weight, InvalidAddMultiStakingCoinProposalError
        )

    def __str__(self) -> str:
        return (
            f"AddMultiStakingCoinProposal: Title: {self.title} "
            f"Description: {self.description} Denom: {self.denom} "
            f"TokenWeight: {self.bond_weight}"
        )


@dataclass
class UpdateBondWeightProposal:
    """Proposes a new bond weight for an existing multi-staking denomination."""

    title: str
    description: str
    denom: str
    updated_bond_weight: Dec | None

    def proposal_route(self) -> str:
        return ROUTER_KEY

    def proposal_type(self) -> str:
        return PROPOSAL_TYPE_UPDATE_BOND_WEIGHT

    def validate_basic(self) -> None:
        """Run stateless checks, raising on the first failure."""
        _validate_abstract(self.title, self.description)
        _validate_denom_and_weight(
            self.denom, self.updated_bond_weight, InvalidUpdateBondWeightProposalError
        )

    def __str__(self) -> str:
        return (
            f"UpdateBondWeightProposal: Title: {self.title} "
            f"Description: {self.description} Denom: {self.denom} "
            f"TokenWeight: {self.updated_bond_weight}"
        )