"""In-memory account repository."""

from typing import Iterable

from atm.models.account import Account
from atm.models.exceptions import AccountAlreadyExistsError


class AccountRepository:
    """Ordered, in-memory store of accounts keyed by account number."""

    def __init__(self, accounts: Iterable[Account] = ()):
        """
        Initialize the repository with a fixed set of accounts.

        Args:
            accounts: Accounts to store, kept in the given order

        Raises:
            AccountAlreadyExistsError: If two accounts share an account number
        """
        self._accounts: dict[str, Account] = {}
        for account in accounts:
            if account.account_no in self._accounts:
                raise AccountAlreadyExistsError(
                    f"Account {account.account_no} already exists"
                )
            self._accounts[account.account_no] = account

    @classmethod
    def from_seeds(cls, seeds) -> "AccountRepository":
        """
        Build a repository from seed entries.

        Args:
            seeds: Objects with account_no, pin, holder and balance attributes

        Returns:
            A repository holding one Account per seed
        """
        return cls(
            Account(seed.account_no, seed.pin, seed.holder, seed.balance)
            for seed in seeds
        )

    def find_by_account_no(self, account_no: str) -> Account | None:
        """
        Find an account by account number.

        Args:
            account_no: The account number to search for

        Returns:
            Account object if found, None otherwise
        """
        return self._accounts.get(account_no)

    def all(self) -> list[Account]:
        """Return every account in insertion order."""
        return list(self._accounts.values())
