"""Text console for the ATM: login prompt, main menu and formatted output."""

from decimal import Decimal
from typing import Callable

from tabulate import tabulate

from atm.models.account import to_amount
from atm.models.exceptions import (
    AccountNotFoundError,
    BankError,
    InvalidAmountError,
    SameAccountError,
)
from atm.services.atm_service import AtmService, Session
from config.settings import Settings

RULE = '=' * 41

MENU = (
    "\n========== ATM MAIN MENU ==========\n"
    "1. Balance Inquiry\n"
    "2. Deposit\n"
    "3. Withdrawal\n"
    "4. Transfer Money\n"
    "5. Transaction History\n"
    "6. Logout\n"
    "==================================="
)

LOGOUT_CHOICE = 6


class AtmConsole:
    """Interactive menu driving an AtmService.

    Input and output go through the given callables; EOF on input ends
    the program.
    """

    def __init__(
        self,
        service: AtmService,
        settings: Settings,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.service = service
        self.settings = settings
        self._input = input_fn
        self._output = output_fn
        self._actions = {
            1: self.check_balance,
            2: self.deposit,
            3: self.withdraw,
            4: self.transfer,
            5: self.show_history,
        }

    def _money(self, amount: Decimal) -> str:
        return '{}{:,.2f}'.format(self.settings.currency_symbol, amount)

    def _error(self, err: Exception) -> None:
        self._output(f"\nError: {err}")

    def _read_amount(self, prompt: str) -> Decimal | None:
        """Parse an amount; malformed input is reported and yields None."""
        text = self._input(prompt)
        try:
            return to_amount(text)
        except InvalidAmountError:
            self._output("Error: Invalid input. Please enter a valid number.")
            return None

    def run(self) -> None:
        """Login/menu loop until the user declines another login or input ends."""
        self._output(RULE)
        self._output("   WELCOME TO ATM SIMULATION SYSTEM")
        self._output(RULE)
        if self.settings.show_demo_accounts:
            self.show_demo_accounts()

        try:
            while True:
                session = self.login()
                if session is not None:
                    self.main_menu(session)
                again = self._input("\nDo you want to login with another account? (y/n): ")
                if again.strip().lower() != 'y':
                    break
        except EOFError:
            pass
        self._output("\nThank you for using our ATM system!")

    def show_demo_accounts(self) -> None:
        rows = [
            [seed.account_no, seed.pin, seed.holder, self._money(seed.balance)]
            for seed in self.settings.seed_accounts
        ]
        self._output("\n========== TEST ACCOUNTS ==========")
        self._output(tabulate(rows, headers=["Account", "PIN", "Holder", "Balance"]))

    def login(self) -> Session | None:
        self._output("\n========== ATM LOGIN ==========")
        account_no = self._input("Enter Account Number: ").strip()
        pin = self._input("Enter PIN: ").strip()
        try:
            session = self.service.login(account_no, pin)
        except BankError as err:
            self._error(err)
            self._output("Please try again.")
            return None
        self._output(f"\nLogin successful! Welcome, {self.service.get_holder(session)}!")
        return session

    def main_menu(self, session: Session) -> None:
        while True:
            self._output(MENU)
            raw = self._input("Enter your choice: ")
            try:
                choice = int(raw.strip())
            except ValueError:
                self._output("Invalid input! Please enter a number.")
                continue

            if choice == LOGOUT_CHOICE:
                self.service.logout(session)
                self._output("\nThank you for using our ATM. Goodbye!")
                return
            action = self._actions.get(choice)
            if action is None:
                self._output("\nInvalid choice! Please try again.")
                continue
            try:
                action(session)
            except BankError as err:
                self._error(err)

    def check_balance(self, session: Session) -> None:
        self._output("\n========== BALANCE INQUIRY ==========")
        self._output(f"Account Holder: {self.service.get_holder(session)}")
        self._output(f"Account Number: {session.account_no}")
        self._output(f"Current Balance: {self._money(self.service.get_balance(session))}")

    def deposit(self, session: Session) -> None:
        self._output("\n========== DEPOSIT ==========")
        amount = self._read_amount(f"Enter deposit amount: {self.settings.currency_symbol}")
        if amount is None:
            return
        self.service.deposit(session, amount)
        self._output("\nDeposit successful!")
        self._output(f"New Balance: {self._money(self.service.get_balance(session))}")

    def withdraw(self, session: Session) -> None:
        self._output("\n========== WITHDRAWAL ==========")
        self._output(f"Current Balance: {self._money(self.service.get_balance(session))}")
        amount = self._read_amount(f"Enter withdrawal amount: {self.settings.currency_symbol}")
        if amount is None:
            return
        self.service.withdraw(session, amount)
        self._output("\nWithdrawal successful!")
        self._output(f"New Balance: {self._money(self.service.get_balance(session))}")

    def transfer(self, session: Session) -> None:
        self._output("\n========== TRANSFER MONEY ==========")
        self._output(f"Current Balance: {self._money(self.service.get_balance(session))}")
        to_account_no = self._input("Enter recipient account number: ").strip()

        # Report a bad recipient before asking for the amount.
        receiver = self.service.directory.find_by_number(to_account_no)
        if receiver is None:
            self._error(AccountNotFoundError())
            return
        if receiver.account_no == session.account_no:
            self._error(SameAccountError())
            return

        self._output(f"Recipient: {receiver.holder}")
        amount = self._read_amount(f"Enter transfer amount: {self.settings.currency_symbol}")
        if amount is None:
            return
        self.service.transfer(session, to_account_no, amount)

        self._output("\n========== TRANSFER SUCCESSFUL ==========")
        self._output(f"Transferred: {self._money(amount)}")
        self._output(f"To: {receiver.holder}")
        self._output(f"Your New Balance: {self._money(self.service.get_balance(session))}")

    def show_history(self, session: Session) -> None:
        history = self.service.history(session)
        if not history:
            self._output("\n=== No transactions found ===")
            return
        rows = [
            [
                txn.type.value,
                self._money(txn.amount),
                self._money(txn.balance_after),
                txn.detail,
                txn.time.ctime(),
            ]
            for txn in history
        ]
        self._output("\n========== TRANSACTION HISTORY ==========")
        self._output(tabulate(rows, headers=["Type", "Amount", "Balance", "Details", "Time"]))
