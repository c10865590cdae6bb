"""
Bank aggregate for the bank ledger.

This module contains the orchestration across accounts: lookup, transfers,
reporting and monthly interest.
"""

import logging
from decimal import Decimal
from typing import Iterator, List, Optional, Tuple

from .accounts import (
    BankAccount, CheckingAccount, InterestBearing, PremiumAccount, SavingsAccount,
    StudentAccount,
)
from .models import OperationResult, OutcomeStatus, TransactionType, format_money, to_decimal


class Bank:
    """Owns a collection of accounts and operates across them."""

    def __init__(self):
        """Initialize an empty bank."""
        self._accounts: List[BankAccount] = []
        self.logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[BankAccount]:
        return iter(tuple(self._accounts))

    @property
    def accounts(self) -> Tuple[BankAccount, ...]:
        return tuple(self._accounts)

    def add_account(self, account: BankAccount) -> None:
        """Register an account. Duplicate numbers are not checked."""
        self._accounts.append(account)
        self.logger.info(f"Added {account.kind.value} account {account.account_number}")

    def find_account(self, account_number: int) -> Optional[BankAccount]:
        """Get the first account with the given number, or None."""
        for account in self._accounts:
            if account.account_number == account_number:
                self.logger.debug(f"Found account {account_number}")
                return account

        self.logger.warning(f"Account not found! ({account_number})")
        return None

    def transfer(self, from_account: int, to_account: int, amount) -> OperationResult:
        """Transfer money between accounts.

        The sender's withdrawal policy and the receiver's deposit policy are
        both consulted before any balance changes, so a rejected leg leaves
        both accounts untouched. A transfer to the same account is a debit
        followed by a credit, so only the withdrawal policy applies.
        """
        amount = to_decimal(amount)
        sender = self.find_account(from_account)
        receiver = self.find_account(to_account)

        if sender is None or receiver is None:
            return self._reject(OutcomeStatus.ACCOUNT_NOT_FOUND,
                                "One or both accounts not found.", amount)

        if amount <= 0:
            return self._reject(OutcomeStatus.INVALID_TRANSFER_AMOUNT,
                                "Invalid transfer amount.", amount)

        rejection = sender.check_withdrawal(amount)
        if rejection is None and receiver is not sender:
            rejection = receiver.check_deposit(amount)
        if rejection is not None:
            self.logger.warning(
                f"Transfer {from_account} -> {to_account} rejected: {rejection.message}")
            return rejection

        sender.withdraw(amount)
        receiver.deposit(amount)
        sender.record_transaction(f"Transferred {format_money(amount)} to {to_account}",
                                  TransactionType.TRANSFER_OUT, amount)
        receiver.record_transaction(f"Received {format_money(amount)} from {from_account}",
                                    TransactionType.TRANSFER_IN, amount)

        message = f"Transferred {format_money(amount)} from {from_account} to {to_account}."
        self.logger.info(message)
        return OperationResult.success(message, amount, from_account)

    def show_all_accounts(self) -> str:
        """Render the report of every account in registration order."""
        lines = ["===== Bank Account Report ====="]
        for account in self._accounts:
            lines.append(account.display_info())
            lines.append('-' * 29)
        return "\n".join(lines)

    def apply_monthly_interest(self) -> List[OperationResult]:
        """Credit interest to every interest-bearing account."""
        results = []
        for account in self._accounts:
            if isinstance(account, InterestBearing):
                results.append(account.calculate_interest())
        return results

    def total_balance(self) -> Decimal:
        """Sum of all account balances."""
        total = Decimal('0.00')
        for account in self._accounts:
            total += account.balance
        return total

    def _reject(self, status: OutcomeStatus, message: str, amount: Decimal) -> OperationResult:
        self.logger.warning(message)
        return OperationResult.rejected(status, message, amount)


def create_demo_bank() -> Bank:
    """
    Create a Bank holding one account of each variant.

    Returns:
        Bank with accounts 1001 (savings), 1002 (checking),
        1003 (premium) and 1004 (student)
    """
    bank = Bank()
    bank.add_account(SavingsAccount(1001, "Pratima Khadka", Decimal('2000.00')))
    bank.add_account(CheckingAccount(1002, "Naresh Oli", Decimal('500.00')))
    bank.add_account(PremiumAccount(1003, "Suresh Khatri", Decimal('15000.00')))
    bank.add_account(StudentAccount(1004, "Aayushma Acharya", Decimal('3000.00')))
    return bank
