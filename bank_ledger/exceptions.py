"""Exceptions for rejected ledger operations."""

from .models import OutcomeStatus


class BankError(Exception):
    """Base exception for all rejected ledger operations."""

    def __init__(self, result):
        super().__init__(result.message)
        self.result = result

    @property
    def status(self) -> OutcomeStatus:
        return self.result.status


class InvalidAmountError(BankError):
    """Raised when a non-positive amount is deposited."""
    pass


class InsufficientFundsError(BankError):
    """Raised when a withdrawal exceeds the available balance."""
    pass


class BelowMinimumBalanceError(BankError):
    """Raised when a withdrawal would breach the account's minimum balance."""
    pass


class AboveMaximumBalanceError(BankError):
    """Raised when a deposit would exceed the account's maximum balance."""
    pass


class WithdrawalLimitExceededError(BankError):
    """Raised when a savings account has used up its withdrawals."""
    pass


class AccountNotFoundError(BankError):
    """Raised when an account cannot be found."""
    pass


class InvalidTransferAmountError(BankError):
    """Raised when a transfer amount is not positive."""
    pass


_ERRORS = {
    OutcomeStatus.INVALID_AMOUNT: InvalidAmountError,
    OutcomeStatus.INSUFFICIENT_FUNDS: InsufficientFundsError,
    OutcomeStatus.BELOW_MINIMUM_BALANCE: BelowMinimumBalanceError,
    OutcomeStatus.ABOVE_MAXIMUM_BALANCE: AboveMaximumBalanceError,
    OutcomeStatus.WITHDRAWAL_LIMIT_EXCEEDED: WithdrawalLimitExceededError,
    OutcomeStatus.ACCOUNT_NOT_FOUND: AccountNotFoundError,
    OutcomeStatus.INVALID_TRANSFER_AMOUNT: InvalidTransferAmountError,
}


def error_for_status(status: OutcomeStatus) -> type:
    """Return the exception class for a rejection status."""
    return _ERRORS.get(status, BankError)
