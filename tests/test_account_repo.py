"""Tests for AccountRepository."""

from decimal import Decimal

import pytest

from atm.models.account import Account
from atm.models.exceptions import AccountAlreadyExistsError
from atm.repositories.account_repo import AccountRepository
from config.settings import AccountSeed, DEFAULT_SEED_ACCOUNTS


@pytest.fixture
def account_repo():
    """Create an AccountRepository with two accounts."""
    return AccountRepository(
        [
            Account("1001", "1234", "Alice", Decimal("500")),
            Account("1002", "5678", "Bob", Decimal("0")),
        ]
    )


def test_find_by_account_no(account_repo):
    account = account_repo.find_by_account_no("1002")

    assert account is not None
    assert account.holder == "Bob"


def test_find_by_account_no_not_found(account_repo):
    """Should return None for non-existent account."""
    assert account_repo.find_by_account_no("9999") is None


def test_all_keeps_insertion_order(account_repo):
    assert [account.account_no for account in account_repo.all()] == ["1001", "1002"]
    assert len(account_repo.all()) == 2


def test_duplicate_account_no_raises_error():
    """Should raise AccountAlreadyExistsError for a repeated account number."""
    with pytest.raises(AccountAlreadyExistsError) as exc_info:
        AccountRepository(
            [
                Account("1001", "1234", "Alice"),
                Account("1001", "0000", "Mallory"),
            ]
        )

    assert "1001" in str(exc_info.value)


def test_from_seeds_default_roster():
    repo = AccountRepository.from_seeds(DEFAULT_SEED_ACCOUNTS)

    assert len(repo.all()) == 6
    first = repo.find_by_account_no("1001")
    assert first.holder == "Ehindero Henry"
    assert first.balance == Decimal("5000000.00")
    assert first.verify_pin("1234")
    assert repo.find_by_account_no("1006").balance == Decimal("0")


def test_from_seeds_builds_independent_accounts():
    seeds = [AccountSeed("1", "1111", "One", Decimal("10"))]

    first = AccountRepository.from_seeds(seeds)
    second = AccountRepository.from_seeds(seeds)
    first.find_by_account_no("1").deposit(5)

    assert second.find_by_account_no("1").balance == Decimal("10")
