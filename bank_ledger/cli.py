"""
CLI interface for the bank ledger.

This module renders ledger outcomes for the console. The ledger itself never
prints; every operation returns an OperationResult that is echoed here.
"""

import click
import logging
from decimal import Decimal, InvalidOperation

from .models import OperationResult
from .bank import Bank, create_demo_bank


class BankCLI:
    """CLI wrapper for bank operations."""

    def __init__(self, bank: Bank = None):
        """Initialize CLI with a bank, the sample bank by default."""
        self.bank = bank if bank is not None else create_demo_bank()

    def format_currency(self, amount: Decimal) -> str:
        """Format currency for display."""
        return f"${amount:,.2f}"

    def parse_currency(self, amount_str: str) -> Decimal:
        """Parse currency input."""
        try:
            # Remove $ and commas
            clean_str = amount_str.replace('$', '').replace(',', '').strip()
            amount = Decimal(clean_str)
        except (InvalidOperation, ValueError):
            raise ValueError(f"Invalid amount: {amount_str}")

        # NaN and infinity are not amounts
        if not amount.is_finite():
            raise ValueError(f"Invalid amount: {amount_str}")
        return amount

    def echo_result(self, result: OperationResult):
        """Echo an operation outcome."""
        if result.ok:
            click.echo(f"✅ {result.message}")
        else:
            click.echo(f"❌ {result.message}", err=True)

    def run_scenario(self, months: int = 1):
        """Drive the sample scenario against the bank."""
        bank = self.bank
        steps = [
            lambda: bank.find_account(1001).withdraw(200),
            lambda: bank.find_account(1002).withdraw(600),
            lambda: bank.find_account(1003).calculate_interest(),
            lambda: bank.find_account(1004).deposit(1000),
            lambda: bank.transfer(1001, 1002, 100),
        ]
        for step in steps:
            self.echo_result(step())

        for _ in range(months):
            for result in bank.apply_monthly_interest():
                self.echo_result(result)


@click.group()
@click.option('--log-level', default='WARNING', envvar='BANK_LEDGER_LOG_LEVEL',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.pass_context
def cli(ctx, log_level):
    """Bank Ledger CLI"""
    logging.basicConfig(level=log_level.upper(),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    ctx.ensure_object(dict)
    ctx.obj['cli'] = BankCLI()


@cli.command()
@click.option('--months', default=1, type=click.IntRange(min=0),
              help='Number of monthly interest runs (default: 1)')
@click.option('--history/--no-history', default=True,
              help='Show every transaction history')
@click.pass_context
def demo(ctx, months, history):
    """Run the sample scenario and print the results."""
    bank_cli = ctx.obj['cli']

    bank_cli.run_scenario(months)

    click.echo(f"\n{bank_cli.bank.show_all_accounts()}")
    click.echo(f"Total Holdings: {bank_cli.format_currency(bank_cli.bank.total_balance())}")

    if history:
        for account in bank_cli.bank:
            click.echo(f"\n{account.show_transactions()}")


@cli.command()
@click.option('--from-account', type=int, prompt='From account number', help='Source account number')
@click.option('--to-account', type=int, prompt='To account number', help='Destination account number')
@click.option('--amount', prompt='Transfer amount', help='Amount to transfer')
@click.pass_context
def transfer(ctx, from_account, to_account, amount):
    """Transfer money between sample accounts."""
    bank_cli = ctx.obj['cli']

    try:
        transfer_amount = bank_cli.parse_currency(amount)
        result = bank_cli.bank.transfer(from_account, to_account, transfer_amount)
        bank_cli.echo_result(result)
        if not result.ok:
            return

        for number in (from_account, to_account):
            account = bank_cli.bank.find_account(number)
            click.echo(f"Account {number} Balance: {bank_cli.format_currency(account.balance)}")

    except ValueError as e:
        click.echo(f"❌ Error: {e}", err=True)


@cli.command()
@click.pass_context
def report(ctx):
    """Show the report of the sample accounts."""
    bank_cli = ctx.obj['cli']
    click.echo(bank_cli.bank.show_all_accounts())


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
