"""Tests for Account withdraw operations."""

from decimal import Decimal

import pytest

from atm.models.account import Account
from atm.models.exceptions import InsufficientFundsError, InvalidAmountError
from atm.models.transaction import TransactionType


@pytest.fixture
def account():
    """Create an account with a starting balance."""
    return Account("1004", "3829", "Ajao Michael", Decimal("100.00"))


def test_withdraw_success(account):
    """Withdraw from a funded account."""
    transaction = account.withdraw(Decimal("40.50"), "ATM cash")

    assert account.balance == Decimal("59.50")
    assert transaction.type == TransactionType.WITHDRAWAL
    assert transaction.amount == Decimal("40.50")
    assert transaction.balance_after == Decimal("59.50")
    assert transaction.detail == "ATM cash"
    assert account.history() == (transaction,)


def test_withdraw_exact_balance(account):
    """Withdrawing the exact balance is allowed and leaves zero."""
    account.withdraw(Decimal("100.00"))

    assert account.balance == Decimal("0")
    assert account.history()[-1].balance_after == Decimal("0")


def test_withdraw_one_cent_over_balance(account):
    """Should raise InsufficientFundsError and leave state unchanged."""
    with pytest.raises(InsufficientFundsError):
        account.withdraw(Decimal("100.01"))

    assert account.balance == Decimal("100.00")
    assert account.history() == ()


def test_withdraw_from_empty_account():
    account = Account("1006", "2378", "Omotola")

    with pytest.raises(InsufficientFundsError):
        account.withdraw(1)

    assert account.balance == Decimal("0")


@pytest.mark.parametrize("amount", [0, -5, Decimal("-100.01")])
def test_withdraw_non_positive_amount_raises_error(account, amount):
    """Should raise InvalidAmountError, even when the amount exceeds the balance."""
    with pytest.raises(InvalidAmountError):
        account.withdraw(amount)

    assert account.balance == Decimal("100.00")
    assert account.history() == ()


def test_balance_never_negative_over_sequence(account):
    """Balance stays non-negative through mixed successes and failures."""
    attempts = [30, 80, 70, 0, 1, -3, 200]
    for amount in attempts:
        try:
            account.withdraw(amount)
        except (InsufficientFundsError, InvalidAmountError):
            pass
        assert account.balance >= 0

    assert account.balance == Decimal("0")
    assert len(account.history()) == 2


@pytest.mark.parametrize("amount", ["0.001", "9E+999999"])
def test_withdraw_out_of_range_amount_raises_error(account, amount):
    with pytest.raises(InvalidAmountError):
        account.withdraw(amount)

    assert account.balance == Decimal("100.00")
    assert account.history() == ()
