"""Custom exceptions for the ATM system."""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure kinds surfaced by ledger, directory and session operations."""

    INVALID_AMOUNT = "INVALID_AMOUNT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    SAME_ACCOUNT = "SAME_ACCOUNT"
    ACCOUNT_EXISTS = "ACCOUNT_EXISTS"
    UNAUTHORIZED = "UNAUTHORIZED"


class BankError(Exception):
    """Base exception for all banking-related errors."""

    kind: ErrorKind | None = None
    default_message = "Banking error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class InvalidAmountError(BankError):
    """Raised when an amount is zero, negative or not a number."""

    kind = ErrorKind.INVALID_AMOUNT
    default_message = "Invalid amount entered"


class InsufficientFundsError(BankError):
    """Raised when a withdrawal or transfer exceeds the current balance."""

    kind = ErrorKind.INSUFFICIENT_FUNDS
    default_message = "Insufficient funds in account"


class AuthenticationError(BankError):
    """Raised when the account number or PIN does not match."""

    kind = ErrorKind.AUTHENTICATION_FAILED
    default_message = "Authentication failed"


class AccountNotFoundError(BankError):
    """Raised when a transfer recipient cannot be found."""

    kind = ErrorKind.ACCOUNT_NOT_FOUND
    default_message = "Recipient account not found"


class SameAccountError(BankError):
    """Raised when the transfer recipient is the sending account."""

    kind = ErrorKind.SAME_ACCOUNT
    default_message = "Cannot transfer to the same account"


class AccountAlreadyExistsError(BankError):
    """Raised when two accounts share an account number."""

    kind = ErrorKind.ACCOUNT_EXISTS
    default_message = "Account already exists"


class UnauthorizedError(BankError):
    """Raised when a session handle is no longer the active session."""

    kind = ErrorKind.UNAUTHORIZED
    default_message = "Session is not active, please log in again"
