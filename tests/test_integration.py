"""
Integration tests for the bank ledger.

This module contains integration tests that exercise the package as a whole,
from the public imports through a full scenario and its transaction logs.
"""

import pytest
from decimal import Decimal

import bank_ledger
from bank_ledger import create_demo_bank, OutcomeStatus, TransactionType, BankError


class TestSystemIntegration:
    """Test complete system integration."""

    @pytest.fixture
    def bank(self):
        return create_demo_bank()

    def test_public_api(self):
        assert bank_ledger.__version__ == "0.1.0"
        for name in bank_ledger.__all__:
            assert hasattr(bank_ledger, name)

    def test_complete_scenario(self, bank):
        """Test the sample scenario end to end."""
        savings = bank.find_account(1001)
        checking = bank.find_account(1002)
        premium = bank.find_account(1003)
        student = bank.find_account(1004)

        savings.withdraw(200)
        checking.withdraw(600)
        premium.calculate_interest()
        student.deposit(1000)
        bank.transfer(1001, 1002, 100)
        bank.apply_monthly_interest()

        assert savings.balance == Decimal('1734.00')
        assert checking.balance == Decimal('-35.00')
        assert premium.balance == Decimal('16537.50')
        assert student.balance == Decimal('4000.00')

        assert [r.transaction_type for r in savings.transactions] == [
            TransactionType.WITHDRAWAL,
            TransactionType.WITHDRAWAL,
            TransactionType.TRANSFER_OUT,
            TransactionType.INTEREST,
        ]
        assert [r.transaction_type for r in checking.transactions] == [
            TransactionType.WITHDRAWAL,
            TransactionType.FEE,
            TransactionType.DEPOSIT,
            TransactionType.TRANSFER_IN,
        ]
        assert [r.detail for r in premium.transactions] == [
            "Premium interest of $750.00 added.",
            "Premium interest of $787.50 added.",
        ]

    def test_balance_after_tracks_each_entry(self, bank):
        checking = bank.find_account(1002)
        checking.withdraw(600)

        assert [r.balance_after for r in checking.transactions] == [
            Decimal('-100.00'), Decimal('-135.00'),
        ]

    def test_holdings_change_only_by_fees_and_interest(self, bank):
        """Test transfers conserve money across the bank."""
        before = bank.total_balance()

        bank.transfer(1001, 1002, 100)
        bank.transfer(1003, 1004, 1000)
        bank.transfer(1004, 1001, 4000)

        assert bank.total_balance() == before

    def test_raise_for_status_in_a_workflow(self, bank):
        """Test callers can opt into exceptions for rejected steps."""
        bank.transfer(1001, 1002, 100).raise_for_status()

        with pytest.raises(BankError) as exc_info:
            bank.transfer(1004, 1001, 10000).raise_for_status()

        assert exc_info.value.status is OutcomeStatus.INSUFFICIENT_FUNDS
        assert bank.find_account(1004).balance == Decimal('3000.00')
