"""CLI commands for the Order aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.dto import OrderDTO, OrderLineSpec
from storefront.application.get_order import GetOrderHandler
from storefront.application.list_orders import DEFAULT_PAGE_SIZE, ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.infrastructure.bootstrap import order_repository, product_repository
from storefront.infrastructure.cli.errors import reported_errors

USER_ENV = "STOREFRONT_USER"

user_option = click.option(
    "--user",
    "user_id",
    required=True,
    envvar=USER_ENV,
    help=f"Authenticated user ID (or ${USER_ENV}).",
)


def _parse_lines(raw: str) -> list[OrderLineSpec]:
    """Parse 'P1:3,P2:5' into an OrderLineSpec list."""
    specs: list[OrderLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderLineSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id} {dto.code}  (status={dto.status})")
    click.echo(f"Owner:    {dto.owner_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*48}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} {line.unit_price:>10} {line.subtotal:>10}"
        )
    click.echo(f"  {'-'*48}")
    click.echo(f"  {'Order Total':<27} {dto.total:>21}")


@click.command("place")
@user_option
@click.option("--items", required=True, help="Lines as 'ProductID:Qty,ProductID:Qty'.")
@click.pass_obj
def order_place(data_dir: Path, user_id: str, items: str) -> None:
    """Place a new order."""
    specs = _parse_lines(items)

    with reported_errors():
        handler = PlaceOrderHandler(
            order_repo=order_repository(data_dir),
            product_lookup=product_repository(data_dir),
        )
        dto = handler.handle(owner_id=user_id, line_specs=specs)

    click.echo("Order placed.")
    _display_order(dto)


@click.command("show")
@user_option
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(data_dir: Path, user_id: str, order_id: int) -> None:
    """Show details of one of your orders."""
    with reported_errors():
        handler = GetOrderHandler(order_repo=order_repository(data_dir))
        dto = handler.handle(requester_id=user_id, order_id=order_id)

    _display_order(dto)


@click.command("list")
@user_option
@click.option("--code", default=None, help="Only the order with this code.")
@click.option(
    "--status",
    default=None,
    type=click.Choice(["created", "cancelled"], case_sensitive=False),
    help="Only orders in this status.",
)
@click.option("--page", default=1, show_default=True, type=click.IntRange(min=1))
@click.option("--limit", default=DEFAULT_PAGE_SIZE, show_default=True, type=click.IntRange(min=1))
@click.pass_obj
def order_list(
    data_dir: Path,
    user_id: str,
    code: str | None,
    status: str | None,
    page: int,
    limit: int,
) -> None:
    """List your orders, newest first."""
    with reported_errors():
        handler = ListOrdersHandler(order_repo=order_repository(data_dir))
        result = handler.handle(
            requester_id=user_id, code=code, status=status, page=page, limit=limit
        )

    if not result.orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Code':<24} {'Status':<10} {'Lines':>5} {'Total':>12}")
    click.echo("-" * 61)
    for o in result.orders:
        click.echo(f"{o.id:<6} {o.code:<24} {o.status:<10} {len(o.lines):>5} {o.total:>12}")
    p = result.pagination
    click.echo(f"Page {p.current_page}/{p.total_page}  ({p.total} orders)")


@click.command("cancel")
@user_option
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.pass_obj
def order_cancel(data_dir: Path, user_id: str, order_id: int) -> None:
    """Cancel one of your orders."""
    with reported_errors():
        handler = CancelOrderHandler(order_repo=order_repository(data_dir))
        handler.handle(requester_id=user_id, order_id=order_id)

    click.echo(f"Order #{order_id} cancelled.")
