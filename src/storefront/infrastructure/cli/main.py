import click

from storefront.infrastructure.bootstrap import DATA_DIR_ENV, resolve_data_dir
from storefront.infrastructure.cli.order_commands import (
    order_cancel,
    order_list,
    order_place,
    order_show,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from storefront.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--data-dir",
    envvar=DATA_DIR_ENV,
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding products.json and orders.json.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log INFO events.")
@click.pass_context
def cli(ctx: click.Context, data_dir: str | None, verbose: bool) -> None:
    """Storefront — order placement and lifecycle"""
    configure_logging(verbose)
    ctx.obj = resolve_data_dir(data_dir)


@cli.group()
def order() -> None:
    """Place and manage orders."""


@cli.group()
def product() -> None:
    """Maintain the product catalog."""


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
