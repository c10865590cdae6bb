"""
Bank Ledger

An in-memory simulation of a bank's account ledger with savings, checking,
premium and student accounts, per-account transaction logs, transfers and
monthly interest.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

from .models import (
    AccountKind, TransactionType, OutcomeStatus, TransactionRecord, OperationResult,
)
from .exceptions import BankError
from .accounts import (
    BankAccount, InterestBearing, SavingsAccount, CheckingAccount,
    PremiumAccount, StudentAccount,
)
from .bank import Bank, create_demo_bank
from .cli import main


__all__ = [
    "AccountKind",
    "TransactionType",
    "OutcomeStatus",
    "TransactionRecord",
    "OperationResult",
    "BankError",
    "BankAccount",
    "InterestBearing",
    "SavingsAccount",
    "CheckingAccount",
    "PremiumAccount",
    "StudentAccount",
    "Bank",
    "create_demo_bank",
    "main"
]
