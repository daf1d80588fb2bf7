"""Transaction data model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"


@dataclass(frozen=True)
class Transaction:
    """Represents one completed ledger entry on an account."""

    type: TransactionType
    amount: Decimal
    balance_after: Decimal
    detail: str
    time: datetime

    @classmethod
    def record(
        cls,
        type: TransactionType,
        amount: Decimal,
        balance_after: Decimal,
        detail: str = "",
    ) -> "Transaction":
        """
        Create a transaction stamped with the current time.

        Args:
            type: Deposit or withdrawal
            amount: The transaction amount
            balance_after: Account balance right after this transaction
            detail: Free-text note, used for transfer counterparties

        Returns:
            A new Transaction with the timestamp truncated to whole seconds
        """
        return cls(
            type=type,
            amount=amount,
            balance_after=balance_after,
            detail=detail,
            time=datetime.now().replace(microsecond=0),
        )
