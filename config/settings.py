"""Configuration management for the ATM simulator."""
import logging
import os
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List


@dataclass(frozen=True)
class AccountSeed:
    """One account loaded into the directory at startup."""

    account_no: str
    pin: str
    holder: str
    balance: Decimal = Decimal('0.00')


DEFAULT_SEED_ACCOUNTS = (
    AccountSeed('1001', '1234', 'Ehindero Henry', Decimal('5000000.00')),
    AccountSeed('1002', '5678', 'Juria Momoh', Decimal('3000.00')),
    AccountSeed('1003', '9999', 'Stephen', Decimal('10000.00')),
    AccountSeed('1004', '3829', 'Ajao Michael', Decimal('100.00')),
    AccountSeed('1005', '4783', 'Deji', Decimal('10000.00')),
    AccountSeed('1006', '2378', 'Omotola', Decimal('0.00')),
)

_TRUE_VALUES = ('1', 'true', 'yes', 'on')
_FALSE_VALUES = ('0', 'false', 'no', 'off')


@dataclass
class Settings:
    """Configuration settings for the ATM simulator.

    Every field has a default, so Settings() is a working configuration.
    """

    # Logging
    log_file: str = 'atm.log'
    log_level: str = 'INFO'

    # Console
    currency_symbol: str = '$'
    show_demo_accounts: bool = True

    # Accounts loaded into the directory
    seed_accounts: List[AccountSeed] = field(
        default_factory=lambda: list(DEFAULT_SEED_ACCOUNTS)
    )

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If ATM_LOG_LEVEL or ATM_SHOW_DEMO_ACCOUNTS is not recognised.
        """
        defaults = cls()

        log_level = os.getenv('ATM_LOG_LEVEL', defaults.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"ATM_LOG_LEVEL must be a logging level name, got {log_level!r}")

        show_demo = os.getenv('ATM_SHOW_DEMO_ACCOUNTS')
        if show_demo is None:
            show_demo_accounts = defaults.show_demo_accounts
        elif show_demo.strip().lower() in _TRUE_VALUES:
            show_demo_accounts = True
        elif show_demo.strip().lower() in _FALSE_VALUES:
            show_demo_accounts = False
        else:
            raise ValueError(f"ATM_SHOW_DEMO_ACCOUNTS must be a boolean, got {show_demo!r}")

        return cls(
            log_file=os.getenv('ATM_LOG_FILE', defaults.log_file),
            log_level=log_level,
            currency_symbol=os.getenv('ATM_CURRENCY', defaults.currency_symbol),
            show_demo_accounts=show_demo_accounts,
        )
