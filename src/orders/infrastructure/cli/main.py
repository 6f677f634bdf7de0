import click

from orders.infrastructure.cli.order_commands import order_list, order_show
from orders.infrastructure.logging_config import setup_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Orders — read access to stored orders"""
    setup_logging(verbose)


@cli.group()
def order() -> None:
    """Query orders."""


# Register subcommands
order.add_command(order_list)
order.add_command(order_show)
