"""Main CLI entry point."""

import logging

import click

from ledgerbatch.storage.factories import ENV_HOME, create_workspace

# Import and register all commands at module level
from ledgerbatch.cli.commands import accounts, menu, process, report


@click.group(invoke_without_command=True)
@click.option(
    "--base-dir",
    type=click.Path(file_okay=False),
    help=f"Directory holding input/, archive/ and files/ (overrides {ENV_HOME} environment variable)",
    envvar=ENV_HOME,
)
@click.option("--verbose", is_flag=True, help="Log per-file progress")
@click.pass_context
def cli(ctx, base_dir: str | None, verbose: bool):
    """Ledgerbatch - batch processor for money-transfer files.

    Reads transfer instructions from input/*.txt, settles them against
    files/accounts.txt, appends the outcome to files/report.txt and moves
    processed files to archive/. Without a command, shows an interactive menu.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    # Create the workspace only when actually running something (not for --help)
    if not ctx.resilient_parsing:
        ctx.obj["workspace"] = create_workspace(base_dir=base_dir)

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu.menu)


# Register all commands
process.register_commands(cli)
report.register_commands(cli)
accounts.register_commands(cli)
menu.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
