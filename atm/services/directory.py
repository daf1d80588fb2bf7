"""Account directory: lookup, authentication and transfers."""

import logging

from atm.models.account import Account, to_amount
from atm.models.exceptions import (
    AccountNotFoundError,
    AuthenticationError,
    SameAccountError,
)
from atm.models.transaction import Transaction
from atm.repositories.account_repo import AccountRepository

logger = logging.getLogger(__name__)


class AccountDirectory:
    """Service layer over the fixed set of accounts."""

    def __init__(self, account_repo: AccountRepository):
        """
        Initialize the directory with its account repository.

        Args:
            account_repo: Repository holding every account of the branch
        """
        self._account_repo = account_repo

    @classmethod
    def from_seeds(cls, seeds) -> "AccountDirectory":
        return cls(AccountRepository.from_seeds(seeds))

    def accounts(self) -> list[Account]:
        return self._account_repo.all()

    def find_by_number(self, account_no: str) -> Account | None:
        """
        Look up an account by number.

        Returns:
            The Account, or None when no account has that number
        """
        return self._account_repo.find_by_account_no(account_no)

    def authenticate(self, account_no: str, pin: str) -> Account:
        """
        Check an account number and PIN pair.

        An unknown number and a wrong PIN raise the same error so callers
        cannot tell which one was wrong.

        Args:
            account_no: The account number entered
            pin: The PIN entered

        Returns:
            The matching Account

        Raises:
            AuthenticationError: If the account does not exist or the PIN is wrong
        """
        account = self._account_repo.find_by_account_no(account_no)
        if account is None or not account.verify_pin(pin):
            logger.warning("Failed login attempt for account %s", account_no)
            raise AuthenticationError()

        logger.info("Account %s logged in", account_no)
        return account

    def transfer(
        self, source: Account, to_account_no: str, amount
    ) -> tuple[Transaction, Transaction]:
        """
        Move funds from one account to another.

        The source is debited before the receiver is credited, so a failed
        withdrawal leaves both accounts untouched.

        Args:
            source: The sending account
            to_account_no: The receiving account number
            amount: The amount to transfer (must be positive)

        Returns:
            The (sender, receiver) transactions

        Raises:
            AccountNotFoundError: If the receiver does not exist
            SameAccountError: If the receiver is the sending account
            InvalidAmountError: If the amount is zero, negative or not a number
            InsufficientFundsError: If the sender's balance is too low
        """
        receiver = self._account_repo.find_by_account_no(to_account_no)
        if receiver is None:
            raise AccountNotFoundError(f"Recipient account {to_account_no} not found")
        if receiver.account_no == source.account_no:
            raise SameAccountError()

        amount = to_amount(amount)
        sent = source.withdraw(
            amount,
            f"Transfer to {receiver.holder} (Acc: {receiver.account_no})",
        )
        received = receiver.deposit(
            amount,
            f"Transfer from {source.holder} (Acc: {source.account_no})",
        )

        logger.info(
            "Transferred %s from %s to %s",
            amount,
            source.account_no,
            receiver.account_no,
        )
        return sent, received
