import pytest

from multistaking.errors import (
    InvalidAddMultiStakingCoinProposalError,
    InvalidTotalMultiStakingLocksError,
    InvalidTotalMultiStakingUnlocksError,
    InvalidUnlockCreationHeightError,
    InvalidUpdateBondWeightProposalError,
    MultiStakingError,
)


@pytest.mark.parametrize(
    "error_class, code, message",
    [
        (InvalidAddMultiStakingCoinProposalError, 2, "invalid add multi staking coin proposal"),
        (InvalidUpdateBondWeightProposalError, 3, "invalid update bond weight proposal"),
        (InvalidTotalMultiStakingLocksError, 4, "invalid total multi-staking lock"),
        (InvalidTotalMultiStakingUnlocksError, 5, "invalid total multi-staking unlock"),
        (InvalidUnlockCreationHeightError, 6, "invalid unlock creation height"),
    ],
)
def test_registered_codes_and_messages(error_class, code, message):
    error = error_class()
    assert error.code == code
    assert error.codespace == "multistaking"
    assert str(error) == message


def test_detail_wraps_description():
    error = InvalidAddMultiStakingCoinProposalError("proposal bond token cannot be blank")
    assert str(error) == (
        "proposal bond token cannot be blank: invalid add multi staking coin proposal"
    )
    assert error.detail == "proposal bond token cannot be blank"


def test_subclasses_caught_by_base():
    error = InvalidUnlockCreationHeightError()
    with pytest.raises(MultiStakingError) as info:
        raise error
    assert info.value is error
    assert info.value.code == 6
    assert str(info.value) == "invalid unlock creation height"


def test_codes_are_unique():
    errors = [
        InvalidAddMultiStakingCoinProposalError(),
        InvalidUpdateBondWeightProposalError(),
        InvalidTotalMultiStakingLocksError(),
        InvalidTotalMultiStakingUnlocksError(),
        InvalidUnlockCreationHeightError(),
    ]
    codes = [error.code for error in errors]
    assert sorted(codes) == [2, 3, 4, 5, 6]
    assert len(set(codes)) == len(errors)
    assert all(isinstance(error, MultiStakingError) for error in errors)