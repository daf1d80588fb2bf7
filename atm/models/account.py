"""Account ledger model."""

import logging
from decimal import Decimal, InvalidOperation

from atm.models.exceptions import InsufficientFundsError, InvalidAmountError
from atm.models.transaction import Transaction, TransactionType

logger = logging.getLogger(__name__)


CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("1000000000000")


def to_amount(value) -> Decimal:
    """
    Coerce a numeric value into a Decimal amount in whole cents.

    Floats go through str() so 0.1 stays 0.1 instead of its binary expansion.

    Raises:
        InvalidAmountError: If the value is not a finite number, has fractions
            of a cent, or exceeds MAX_AMOUNT in magnitude
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise InvalidAmountError(f"Invalid amount entered: {value!r}")
    if not amount.is_finite():
        raise InvalidAmountError(f"Invalid amount entered: {value!r}")
    if abs(amount) > MAX_AMOUNT:
        raise InvalidAmountError(
            f"Amount {amount} exceeds maximum allowed amount of {MAX_AMOUNT}"
        )
    cents = amount.quantize(CENT)
    if cents != amount:
        raise InvalidAmountError(f"Amount {amount} has fractions of a cent")
    return cents


class Account:
    """A bank account: identity, PIN, balance and transaction history."""

    def __init__(self, account_no: str, pin: str, holder: str, balance=Decimal("0")):
        initial = to_amount(balance)
        if initial < 0:
            raise InvalidAmountError(
                f"Initial balance cannot be negative: {initial}"
            )
        self._account_no = account_no
        self._pin = pin
        self._holder = holder
        self._balance = initial
        self._history: list[Transaction] = []

    def __repr__(self) -> str:
        return f"Account(account_no={self._account_no!r}, holder={self._holder!r}, balance={self._balance})"

    @property
    def account_no(self) -> str:
        return self._account_no

    @property
    def holder(self) -> str:
        return self._holder

    @property
    def balance(self) -> Decimal:
        return self._balance

    def verify_pin(self, pin: str) -> bool:
        """Compare the given PIN against the stored one (plaintext, no lockout)."""
        return self._pin == pin

    def history(self) -> tuple[Transaction, ...]:
        """Transactions in the order they were made."""
        return tuple(self._history)

    def deposit(self, amount, detail: str = "") -> Transaction:
        """
        Add funds to the account.

        Args:
            amount: The amount to deposit (must be positive)
            detail: Optional note stored on the transaction

        Returns:
            The recorded Transaction

        Raises:
            InvalidAmountError: If the amount is zero, negative or not a number
        """
        amount = to_amount(amount)
        if amount <= 0:
            raise InvalidAmountError(
                f"Deposit amount must be greater than zero, got {amount}"
            )

        self._balance += amount
        transaction = Transaction.record(
            TransactionType.DEPOSIT, amount, self._balance, detail
        )
        self._history.append(transaction)
        logger.debug("Deposit of %s to %s, balance %s", amount, self._account_no, self._balance)
        return transaction

    def withdraw(self, amount, detail: str = "") -> Transaction:
        """
        Take funds out of the account.

        Withdrawing the exact balance is allowed and leaves the account at zero.

        Args:
            amount: The amount to withdraw (must be positive)
            detail: Optional note stored on the transaction

        Returns:
            The recorded Transaction

        Raises:
            InvalidAmountError: If the amount is zero, negative or not a number
            InsufficientFundsError: If the amount is larger than the balance
        """
        amount = to_amount(amount)
        if amount <= 0:
            raise InvalidAmountError(
                f"Withdrawal amount must be greater than zero, got {amount}"
            )
        if amount > self._balance:
            raise InsufficientFundsError(
                f"Insufficient funds: {self._balance} available, {amount} requested"
            )

        self._balance -= amount
        transaction = Transaction.record(
            TransactionType.WITHDRAWAL, amount, self._balance, detail
        )
        self._history.append(transaction)
        logger.debug("Withdrawal of %s from %s, balance %s", amount, self._account_no, self._balance)
        return transaction
