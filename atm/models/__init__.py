"""Data models for the ATM system."""

from .account import Account
from .transaction import Transaction, TransactionType
from .exceptions import (
    ErrorKind,
    BankError,
    InvalidAmountError,
    InsufficientFundsError,
    AuthenticationError,
    AccountNotFoundError,
    SameAccountError,
    AccountAlreadyExistsError,
    UnauthorizedError,
)

__all__ = [
    "Account",
    "Transaction",
    "TransactionType",
    "ErrorKind",
    "BankError",
    "InvalidAmountError",
    "InsufficientFundsError",
    "AuthenticationError",
    "AccountNotFoundError",
    "SameAccountError",
    "AccountAlreadyExistsError",
    "UnauthorizedError",
]
