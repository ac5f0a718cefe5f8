import click

from pos.infrastructure import settings
from pos.infrastructure.cli.catalog_commands import catalog_list
from pos.infrastructure.cli.checkout_commands import checkout_command, shop_command
from pos.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    default=settings.LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity (written to stderr).",
)
def cli(log_level: str) -> None:
    """POS — point-of-sale checkout"""
    configure_logging(level=log_level.upper(), log_file=settings.LOG_FILE)


# Register subcommands
cli.add_command(catalog_list)
cli.add_command(checkout_command)
cli.add_command(shop_command)
