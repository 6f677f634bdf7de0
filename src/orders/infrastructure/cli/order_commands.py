"""CLI commands for the Order entity."""

from __future__ import annotations

import json

import click

from orders.domain.exceptions import DomainException
from orders.domain.model.order import Order
from orders.infrastructure.bootstrap import order_service


def _format_attributes(order: Order) -> str:
    return json.dumps(order.attributes, sort_keys=True, default=str)


@click.command("list")
def order_list() -> None:
    """List all stored orders."""
    orders = order_service().find_all()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<8} {'Attributes'}")
    click.echo("-" * 40)
    for o in orders:
        click.echo(f"{o.id:<8} {_format_attributes(o)}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    service = order_service()

    try:
        order = service.find_by_id(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order.id}")
    for key in sorted(order.attributes):
        click.echo(f"  {key + ':':<20} {order.attributes[key]}")
