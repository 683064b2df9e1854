"""Interactive menu."""

import click

from ledgerbatch.cli.date_filters import QUERY_DATE
from ledgerbatch.cli.commands.process import process_files
from ledgerbatch.cli.commands.report import echo_report_range, list_report
from ledgerbatch.domain.report import ReportService

MENU_TEXT = """1 - process transfer files from input
2 - list all transfers from the report
3 - list transfers from the report between two dates"""


@click.command("menu")
@click.pass_context
def menu(ctx):
    """Choose an operation from a numbered menu."""
    click.echo(MENU_TEXT)
    # IntRange re-prompts until a valid choice is entered
    choice = click.prompt("Choice", type=click.IntRange(1, 3))

    if choice == 1:
        ctx.invoke(process_files)
    elif choice == 2:
        ctx.invoke(list_report)
    else:
        click.echo("\n--- Filter operations by date ---")
        start_date = click.prompt("Start date (yyyy-MM-dd)", type=QUERY_DATE)
        end_date = click.prompt("End date (yyyy-MM-dd)", type=QUERY_DATE)
        service = ReportService(ctx.obj["workspace"].report_path)
        echo_report_range(ctx, service, start_date, end_date)


def register_commands(cli):
    """Register menu command with main CLI."""
    cli.add_command(menu)
