"""Batch processing command."""

import click

from ledgerbatch.cli.commands.accounts import echo_accounts
from ledgerbatch.domain.batch import BatchService
from ledgerbatch.domain.ledger import Ledger


@click.command("process")
@click.pass_context
def process_files(ctx):
    """Process every transfer file in the input directory.

    Each file is archived after processing. The ledger and the report are
    written once all files are done.
    """
    workspace = ctx.obj["workspace"]
    ledger = Ledger.load(workspace.accounts_path)
    service = BatchService(workspace, ledger)

    summary = service.run()
    if summary.no_input:
        click.echo(f"No .txt files to process in {workspace.input_dir}")
        return

    for error in summary.errors:
        click.echo(f"Error: {error}", err=True)

    echo_accounts(ledger)
    click.echo(f"Operations processed: {summary.operation_count}")
    click.echo(f"  Succeeded: {summary.success_count}")
    click.echo(f"  Failed: {summary.error_count}")


def register_commands(cli):
    """Register process command with main CLI."""
    cli.add_command(process_files)
