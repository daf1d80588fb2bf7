"""ATM session service."""

import logging
from dataclasses import dataclass
from decimal import Decimal

from atm.models.account import Account
from atm.models.exceptions import UnauthorizedError
from atm.models.transaction import Transaction
from atm.services.directory import AccountDirectory

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Session:
    """Handle for one login of an authenticated account.

    Handles compare by identity, so a handle from an earlier login never
    matches a later one for the same account.
    """

    account_no: str


class AtmService:
    """Runs ledger operations on behalf of the logged-in session."""

    def __init__(self, directory: AccountDirectory):
        self._directory = directory
        self._active: Session | None = None

    @property
    def directory(self) -> AccountDirectory:
        return self._directory

    @property
    def active_session(self) -> Session | None:
        return self._active

    def login(self, account_no: str, pin: str) -> Session:
        """
        Authenticate and open a session, replacing any session already open.

        Raises:
            AuthenticationError: If the account number or PIN is wrong
        """
        account = self._directory.authenticate(account_no, pin)
        self._active = Session(account.account_no)
        return self._active

    def logout(self, session: Session) -> None:
        """Close the session. Logging out a stale handle is a no-op."""
        if session is self._active:
            logger.info("Account %s logged out", session.account_no)
            self._active = None

    def _account(self, session: Session) -> Account:
        if session is None or session is not self._active:
            logger.warning("Rejected operation on inactive session %s", session)
            raise UnauthorizedError()
        return self._directory.find_by_number(session.account_no)

    def get_balance(self, session: Session) -> Decimal:
        return self._account(session).balance

    def get_holder(self, session: Session) -> str:
        return self._account(session).holder

    def deposit(self, session: Session, amount) -> Transaction:
        return self._account(session).deposit(amount)

    def withdraw(self, session: Session, amount) -> Transaction:
        return self._account(session).withdraw(amount)

    def transfer(
        self, session: Session, to_account_no: str, amount
    ) -> tuple[Transaction, Transaction]:
        """
        Transfer from the session's account to another account.

        Raises:
            UnauthorizedError: If the session is not active
            AccountNotFoundError: If the receiver does not exist
            SameAccountError: If the receiver is the session's own account
            InvalidAmountError: If the amount is zero, negative or not a number
            InsufficientFundsError: If the balance is too low
        """
        return self._directory.transfer(self._account(session), to_account_no, amount)

    def history(self, session: Session) -> tuple[Transaction, ...]:
        return self._account(session).history()
