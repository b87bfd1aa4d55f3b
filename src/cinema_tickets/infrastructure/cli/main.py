import click

from cinema_tickets.infrastructure.cli.purchase_commands import prices, purchase
from cinema_tickets.infrastructure.logging_config import LOG_LEVELS, configure_logging


@click.group()
@click.option(
    "--log-level",
    envvar="CINEMA_TICKETS_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """Cinema Tickets — ticket purchase service"""
    configure_logging(log_level)


# Register subcommands
cli.add_command(purchase)
cli.add_command(prices)
