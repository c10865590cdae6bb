"""
Account variants for the bank ledger.

Every account shares the same record (number, holder, balance, transaction
log). Each variant supplies its own deposit and withdrawal policy through
``check_deposit`` and ``check_withdrawal``; interest-bearing variants also
implement the ``InterestBearing`` capability.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional, Tuple

from .models import (
    AccountKind, OperationResult, OutcomeStatus, TransactionRecord,
    TransactionType, format_money, to_decimal,
)


class BankAccount(ABC):
    """Common record and operations shared by every account variant."""

    kind: AccountKind

    def __init__(self, account_number: int, holder_name: str,
                 balance=Decimal('0.00')):
        """Initialize account with its identity and opening balance."""
        self._account_number = account_number
        self._holder_name = holder_name
        self._balance = to_decimal(balance)
        self._transactions: List[TransactionRecord] = []
        self.logger = logging.getLogger(__name__)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(account_number={self._account_number!r}, "
                f"holder_name={self._holder_name!r}, balance={self._balance!r})")

    @property
    def account_number(self) -> int:
        return self._account_number

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @holder_name.setter
    def holder_name(self, name: str):
        # Empty names are ignored
        if name:
            self._holder_name = name

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def transactions(self) -> Tuple[TransactionRecord, ...]:
        return tuple(self._transactions)

    @property
    def transaction_log(self) -> List[str]:
        """Log entries as ``"<timestamp>: <detail>"`` in insertion order."""
        return [str(record) for record in self._transactions]

    @property
    def interest_bearing(self) -> bool:
        return isinstance(self, InterestBearing)

    # Policy hooks

    @abstractmethod
    def check_deposit(self, amount: Decimal) -> Optional[OperationResult]:
        """Return a rejection if the deposit is not allowed, else None."""

    @abstractmethod
    def check_withdrawal(self, amount: Decimal) -> Optional[OperationResult]:
        """Return a rejection if the withdrawal is not allowed, else None."""

    # Operations

    def deposit(self, amount) -> OperationResult:
        """Deposit money to account."""
        amount = to_decimal(amount)
        rejection = self.check_deposit(amount)
        if rejection is not None:
            return self._log_rejection(rejection)

        self._set_balance(self._balance + amount)
        self.record_transaction(f"Deposited {format_money(amount)}",
                                TransactionType.DEPOSIT, amount)
        self.logger.info(f"Account {self._account_number}: deposited {amount}")
        return self._success(f"Deposited {format_money(amount)}", amount)

    def withdraw(self, amount) -> OperationResult:
        """Withdraw money from account."""
        amount = to_decimal(amount)
        rejection = self.check_withdrawal(amount)
        if rejection is not None:
            return self._log_rejection(rejection)

        self._set_balance(self._balance - amount)
        self.record_transaction(f"Withdrew {format_money(amount)}",
                                TransactionType.WITHDRAWAL, amount)
        self.logger.info(f"Account {self._account_number}: withdrew {amount}")
        return self._success(f"Withdrew {format_money(amount)}", amount)

    def calculate_interest(self) -> Optional[OperationResult]:
        """Accounts without the interest capability earn nothing."""
        return None

    def record_transaction(self, detail: str,
                           transaction_type: TransactionType = TransactionType.NOTE,
                           amount=Decimal('0.00')) -> None:
        """Append an entry to the transaction log."""
        self._transactions.append(TransactionRecord(
            transaction_type=transaction_type,
            detail=detail,
            amount=amount,
            balance_after=self._balance,
        ))

    def show_transactions(self) -> str:
        """Render the transaction history."""
        lines = [f"Transaction History for {self._holder_name}:"]
        lines.extend(self.transaction_log)
        lines.append('-' * 36)
        return "\n".join(lines)

    def display_info(self) -> str:
        """Render account number, holder and balance."""
        return "\n".join([
            f"Account Number: {self._account_number}",
            f"Holder Name: {self._holder_name}",
            f"Balance: {format_money(self._balance)}",
        ])

    # Internal helpers

    def _set_balance(self, amount: Decimal) -> None:
        self._balance = amount

    def _credit_interest(self, rate: Decimal, label: str) -> OperationResult:
        interest = self._balance * rate
        self._set_balance(self._balance + interest)
        detail = f"{label} of {format_money(interest)} added."
        self.record_transaction(detail, TransactionType.INTEREST, interest)
        self.logger.info(f"Account {self._account_number}: interest {interest} at {rate}")
        return self._success(detail, interest)

    def _require_positive_deposit(self, amount: Decimal) -> Optional[OperationResult]:
        if amount <= 0:
            return self._rejection(OutcomeStatus.INVALID_AMOUNT,
                                   "Deposit amount must be positive.", amount)
        return None

    def _rejection(self, status: OutcomeStatus, message: str,
                   amount: Decimal) -> OperationResult:
        return OperationResult.rejected(status, message, amount, self._account_number)

    def _success(self, message: str, amount: Decimal) -> OperationResult:
        return OperationResult.success(message, amount, self._account_number)

    def _log_rejection(self, result: OperationResult) -> OperationResult:
        self.logger.warning(f"Account {self._account_number}: {result.message}")
        return result


class InterestBearing(ABC):
    """Capability of accounts that grow by a periodic interest rate."""

    INTEREST_RATE = Decimal('0.00')

    @abstractmethod
    def calculate_interest(self) -> OperationResult:
        """Credit one period of interest to the balance."""


class SavingsAccount(BankAccount, InterestBearing):
    """Savings account with a minimum balance and three lifetime withdrawals."""

    kind = AccountKind.SAVINGS
    MIN_BALANCE = Decimal('500.00')
    INTEREST_RATE = Decimal('0.02')
    MAX_WITHDRAWALS = 3

    def __init__(self, account_number: int, holder_name: str,
                 balance=Decimal('0.00')):
        super().__init__(account_number, holder_name, balance)
        self._withdrawal_count = 0

    @property
    def withdrawal_count(self) -> int:
        return self._withdrawal_count

    def check_deposit(self, amount: Decimal) -> Optional[OperationResult]:
        return self._require_positive_deposit(amount)

    def check_withdrawal(self, amount: Decimal) -> Optional[OperationResult]:
        if self._withdrawal_count >= self.MAX_WITHDRAWALS:
            return self._rejection(OutcomeStatus.WITHDRAWAL_LIMIT_EXCEEDED,
                                   "Withdrawal limit reached.", amount)
        if self.balance - amount < self.MIN_BALANCE:
            return self._rejection(
                OutcomeStatus.BELOW_MINIMUM_BALANCE,
                f"Cannot withdraw: Minimum balance of {format_money(self.MIN_BALANCE)} required.",
                amount)
        return None

    def withdraw(self, amount) -> OperationResult:
        result = super().withdraw(amount)
        if result.ok:
            self._withdrawal_count += 1
        return result

    def calculate_interest(self) -> OperationResult:
        return self._credit_interest(self.INTEREST_RATE, "Interest")


class CheckingAccount(BankAccount):
    """Checking account that may go negative at the cost of an overdraft fee."""

    kind = AccountKind.CHECKING
    OVERDRAFT_FEE = Decimal('35.00')

    def check_deposit(self, amount: Decimal) -> Optional[OperationResult]:
        return self._require_positive_deposit(amount)

    def check_withdrawal(self, amount: Decimal) -> Optional[OperationResult]:
        return None

    def withdraw(self, amount) -> OperationResult:
        result = super().withdraw(amount)
        if self.balance < 0:
            self._set_balance(self.balance - self.OVERDRAFT_FEE)
            fee_note = f"Overdraft fee of {format_money(self.OVERDRAFT_FEE)} applied."
            self.record_transaction(fee_note, TransactionType.FEE, self.OVERDRAFT_FEE)
            self.logger.warning(f"Account {self.account_number}: overdraft, fee {self.OVERDRAFT_FEE} applied")
            result.message = f"{result.message}. Overdraft! {fee_note}"
        return result


class PremiumAccount(BankAccount, InterestBearing):
    """Premium account with a high minimum balance and a higher rate."""

    kind = AccountKind.PREMIUM
    MIN_BALANCE = Decimal('10000.00')
    INTEREST_RATE = Decimal('0.05')

    def check_deposit(self, amount: Decimal) -> Optional[OperationResult]:
        return self._require_positive_deposit(amount)

    def check_withdrawal(self, amount: Decimal) -> Optional[OperationResult]:
        if self.balance - amount < self.MIN_BALANCE:
            return self._rejection(
                OutcomeStatus.BELOW_MINIMUM_BALANCE,
                f"Cannot withdraw below minimum balance of {format_money(self.MIN_BALANCE)}.",
                amount)
        return None

    def calculate_interest(self) -> OperationResult:
        return self._credit_interest(self.INTEREST_RATE, "Premium interest")


class StudentAccount(BankAccount):
    """Student account capped at a maximum balance."""

    kind = AccountKind.STUDENT
    MAX_BALANCE = Decimal('5000.00')

    def check_deposit(self, amount: Decimal) -> Optional[OperationResult]:
        # No lower bound on the amount, only the cap
        if self.balance + amount > self.MAX_BALANCE:
            return self._rejection(
                OutcomeStatus.ABOVE_MAXIMUM_BALANCE,
                f"Cannot exceed maximum balance of {format_money(self.MAX_BALANCE)}.",
                amount)
        return None

    def check_withdrawal(self, amount: Decimal) -> Optional[OperationResult]:
        if amount > self.balance:
            return self._rejection(OutcomeStatus.INSUFFICIENT_FUNDS,
                                   "Insufficient balance.", amount)
        return None
