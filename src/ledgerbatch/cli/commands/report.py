"""Report listing commands."""

import click

from ledgerbatch.cli.date_filters import resolve_cli_date_range
from ledgerbatch.cli.error_handling import handle_domain_error
from ledgerbatch.domain.errors import DomainError
from ledgerbatch.domain.report import ReportService
from ledgerbatch.utils.date_parser import day_bounds


def _service(ctx) -> ReportService:
    return ReportService(ctx.obj["workspace"].report_path)


def echo_report_lines(lines: list[str], start_label: str, end_label: str) -> None:
    """Print report lines found for a date range."""
    click.echo(f"\n--- Operations from {start_label} to {end_label} ---")
    if not lines:
        click.echo("No operations found for the given period.")
    else:
        for line in lines:
            click.echo(line)
        click.echo(f"Operations found: {len(lines)}")
    click.echo("-" * 40)


def echo_report_range(ctx, service: ReportService, start_date: str, end_date: str) -> None:
    """Print report lines between two ``yyyy-MM-dd`` dates."""
    if not service.exists():
        click.echo("Report file not found.")
        return

    try:
        lines = service.list_by_date(start_date, end_date)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    echo_report_lines(lines, start_date, end_date)


@click.group("report")
def report_group():
    """Query the operations report."""
    pass


@report_group.command("list")
@click.pass_context
def list_report(ctx):
    """List every operation in the report."""
    service = _service(ctx)
    if not service.exists():
        click.echo("Report file not found.")
        return

    click.echo("\n--- All operations from report ---")
    for line in service.list_all():
        click.echo(line)
    click.echo("-" * 40)


@report_group.command("range")
@click.option("--start-date", help="First day (yyyy-MM-dd)")
@click.option("--end-date", help="Last day (yyyy-MM-dd)")
@click.option("--this-month", is_flag=True, help="Filter to current month")
@click.option("--this-year", is_flag=True, help="Filter to current year")
@click.option("--this-week", is_flag=True, help="Filter to current week")
@click.option("--last-month", is_flag=True, help="Filter to previous month")
@click.option("--last-year", is_flag=True, help="Filter to previous year")
@click.option("--last-week", is_flag=True, help="Filter to previous week")
@click.pass_context
def report_range(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    this_year: bool,
    this_week: bool,
    last_month: bool,
    last_year: bool,
    last_week: bool,
):
    """List operations between two dates, both inclusive.

    Examples:
        ledgerbatch report range --start-date 2024-01-01 --end-date 2024-01-31
        ledgerbatch report range --last-month
    """
    period_flags = {
        "this-month": this_month,
        "this-year": this_year,
        "this-week": this_week,
        "last-month": last_month,
        "last-year": last_year,
        "last-week": last_week,
    }
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags=period_flags
    )

    service = _service(ctx)
    if not service.exists():
        click.echo("Report file not found.")
        return

    lines = service.list_between(*day_bounds(start, end))
    echo_report_lines(lines, start.isoformat(), end.isoformat())


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
