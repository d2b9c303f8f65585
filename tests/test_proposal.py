import pytest

from multistaking.dec import Dec
from multistaking.errors import (
    InvalidAddMultiStakingCoinProposalError,
    InvalidUpdateBondWeightProposalError,
)
from multistaking.proposal import (
    AddMultiStakingCoinProposal,
    ProposalError,
    UpdateBondWeightProposal,
)


def test_route_and_type():
    add = AddMultiStakingCoinProposal("t", "d", "token", Dec.one())
    update = UpdateBondWeightProposal("t", "d", "token", Dec.one())
    assert add.proposal_route() == "multistaking"
    assert add.proposal_type() == "AddMultiStakingCoin"
    assert update.proposal_route() == "multistaking"
    assert update.proposal_type() == "UpdateBondWeight"


def test_proposal_strings():
    add = AddMultiStakingCoinProposal("Add #1", "Add token", "token", Dec.one())
    update = UpdateBondWeightProposal(
        "Change #2", "Change Bond token weight", "token", Dec.one()
    )
    assert str(add) == (
        "AddMultiStakingCoinProposal: Title: Add #1 Description: Add token "
        "Denom: token TokenWeight: 1.000000000000000000"
    )
    assert str(update) == (
        "UpdateBondWeightProposal: Title: Change #2 Description: Change Bond token weight "
        "Denom: token TokenWeight: 1.000000000000000000"
    )


@pytest.mark.parametrize(
    "cls, error",
    [
        (AddMultiStakingCoinProposal, InvalidAddMultiStakingCoinProposalError),
        (UpdateBondWeightProposal, InvalidUpdateBondWeightProposalError),
    ],
)
def test_valid_proposal_passes_and_keeps_fields(cls, error):
    proposal = cls("test", "test desc", "token", Dec.one())
    assert proposal.validate_basic() is None
    assert proposal.denom == "token"


@pytest.mark.parametrize(
    "cls, error",
    [
        (AddMultiStakingCoinProposal, InvalidAddMultiStakingCoinProposalError),
        (UpdateBondWeightProposal, InvalidUpdateBondWeightProposalError),
    ],
)
def test_blank_denom(cls, error):
    with pytest.raises(error, match="cannot be blank"):
        cls("test", "test desc", "", Dec.one()).validate_basic()


@pytest.mark.parametrize(
    "cls, error",
    [
        (AddMultiStakingCoinProposal, InvalidAddMultiStakingCoinProposalError),
        (UpdateBondWeightProposal, InvalidUpdateBondWeightProposalError),
    ],
)
@pytest.mark.parametrize("weight", ["-1", "0"])
def test_non_positive_weight(cls, error, weight):
    with pytest.raises(error, match="must be positive"):
        cls("test", "test desc", "token", Dec.from_str(weight)).validate_basic()


@pytest.mark.parametrize("cls", [AddMultiStakingCoinProposal, UpdateBondWeightProposal])
@pytest.mark.parametrize(
    "title, description",
    [("", "desc"), ("   ", "desc"), ("title", ""), ("x" * 141, "desc"), ("title", "d" * 10001)],
)
def test_invalid_title_or_description(cls, title, description):
    with pytest.raises(ProposalError):
        cls(title, description, "token", Dec.one()).validate_basic()


def test_error_message_carries_description():
    with pytest.raises(InvalidAddMultiStakingCoinProposalError) as info:
        AddMultiStakingCoinProposal("t", "d", "", Dec.one()).validate_basic()
    assert str(info.value) == (
        "proposal bond token cannot be blank: invalid add multi staking coin proposal"
    )
    assert info.value.code == 2