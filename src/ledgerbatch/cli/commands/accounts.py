"""Account listing command."""

import click

from ledgerbatch.domain.ledger import Ledger
from ledgerbatch.utils.amount_parser import format_amount


def echo_accounts(ledger: Ledger) -> None:
    """Print the balances of every account in the ledger."""
    click.echo("--- Current account balances ---")
    for account in ledger.list_accounts():
        click.echo(f"{account.account_id} | {format_amount(account.balance)}")
    click.echo("-" * 32)


@click.command("accounts")
@click.pass_context
def list_accounts(ctx):
    """List all accounts and their balances."""
    workspace = ctx.obj["workspace"]
    ledger = Ledger.load(workspace.accounts_path)

    if len(ledger) == 0:
        click.echo("No accounts found.")
        return

    echo_accounts(ledger)


def register_commands(cli):
    """Register accounts command with main CLI."""
    cli.add_command(list_accounts)
