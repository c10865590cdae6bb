"""
Data models for the bank ledger.

This module contains the enums, records and operation results shared by
accounts, the bank and the CLI.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional
from enum import Enum


class AccountKind(Enum):
    """Variants of bank accounts."""
    SAVINGS = "savings"
    CHECKING = "checking"
    PREMIUM = "premium"
    STUDENT = "student"


class TransactionType(Enum):
    """Types of transactions."""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    INTEREST = "interest"
    FEE = "fee"
    TRANSFER_IN = "transfer_in"
    TRANSFER_OUT = "transfer_out"
    NOTE = "note"


class OutcomeStatus(Enum):
    """Outcome of a deposit, withdrawal, interest or transfer operation."""
    SUCCESS = "success"
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    BELOW_MINIMUM_BALANCE = "below_minimum_balance"
    ABOVE_MAXIMUM_BALANCE = "above_maximum_balance"
    WITHDRAWAL_LIMIT_EXCEEDED = "withdrawal_limit_exceeded"
    ACCOUNT_NOT_FOUND = "account_not_found"
    INVALID_TRANSFER_AMOUNT = "invalid_transfer_amount"


def to_decimal(value) -> Decimal:
    """Convert a number or numeric string to a finite Decimal."""
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {value}")

    if not result.is_finite():
        raise ValueError(f"Invalid amount: {value}")
    return result


def format_money(amount: Decimal) -> str:
    """Format an amount the way log entries and messages show it."""
    return f"${to_decimal(amount):.2f}"


@dataclass
class TransactionRecord:
    """Represents one entry of an account's transaction log."""

    transaction_type: TransactionType = TransactionType.DEPOSIT
    detail: str = ""
    amount: Decimal = Decimal('0.00')
    balance_after: Decimal = Decimal('0.00')
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        """Initialize record after creation."""
        if self.timestamp is None:
            self.timestamp = datetime.now()

        # Ensure amounts are Decimals
        if not isinstance(self.amount, Decimal):
            self.amount = to_decimal(self.amount)

        if not isinstance(self.balance_after, Decimal):
            self.balance_after = to_decimal(self.balance_after)

    def __str__(self) -> str:
        return f"{self.timestamp}: {self.detail}"


@dataclass
class OperationResult:
    """Outcome of a ledger operation, returned instead of printed."""

    status: OutcomeStatus = OutcomeStatus.SUCCESS
    message: str = ""
    amount: Optional[Decimal] = None
    account_number: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    def raise_for_status(self) -> "OperationResult":
        """Raise the matching BankError if the operation was rejected."""
        if self.ok:
            return self

        from .exceptions import error_for_status
        raise error_for_status(self.status)(self)

    @classmethod
    def success(cls, message: str, amount: Optional[Decimal] = None,
                account_number: Optional[int] = None) -> "OperationResult":
        return cls(OutcomeStatus.SUCCESS, message, amount, account_number)

    @classmethod
    def rejected(cls, status: OutcomeStatus, message: str,
                 amount: Optional[Decimal] = None,
                 account_number: Optional[int] = None) -> "OperationResult":
        return cls(status, message, amount, account_number)
