import logging

import click

from settings_kit.commands.check import check
from settings_kit.commands.setup import setup
from settings_kit.commands.validate import validate
from settings_kit.context import create_context
from settings_kit.error_boundary import cli_error_boundary
from settings_kit.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Validate and set up Claude Code settings."""
    _configure_logging(debug)

    # Tests pass a prepared context through obj
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(check)
cli.add_command(setup)
cli.add_command(validate)


def main() -> None:
    """Entry point with error boundary."""
    cli_error_boundary(cli)()


if __name__ == "__main__":
    main()
