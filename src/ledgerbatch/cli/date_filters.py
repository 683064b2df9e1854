"""CLI helpers for date input and date range resolution."""

from datetime import date

import click

from ledgerbatch.utils.date_parser import get_date_range, parse_query_date

PERIODS = ("this-month", "this-year", "this-week", "last-month", "last-year", "last-week")


class QueryDateType(click.ParamType):
    """A strict ``yyyy-MM-dd`` date, kept as the string the user typed."""

    name = "yyyy-MM-dd"

    def convert(self, value, param, ctx):
        try:
            parse_query_date(value)
        except ValueError:
            self.fail("Invalid date format. Example: 2024-01-15", param, ctx)
        return value.strip()


QUERY_DATE = QueryDateType()


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
) -> tuple[date, date]:
    """Resolve CLI date range from period flags or explicit dates."""
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count > 1:
        click.echo(
            "Error: Only one period option (--this-month, --this-year, --this-week, --last-month, --last-year, --last-week) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --this-year, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if period_count == 1:
        for period, is_set in period_flags.items():
            if is_set:
                return get_date_range(period)

    if not start_date or not end_date:
        click.echo(
            "Error: Both --start-date and --end-date are required unless a period option is given.",
            err=True,
        )
        ctx.exit(1)

    try:
        start = parse_query_date(start_date)
    except ValueError as e:
        click.echo(f"Error: Invalid start date: {e}", err=True)
        ctx.exit(1)

    try:
        end = parse_query_date(end_date)
    except ValueError as e:
        click.echo(f"Error: Invalid end date: {e}", err=True)
        ctx.exit(1)

    return start, end
