"""CLI commands for seeding and editing the product catalog."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import click

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.bootstrap import product_repository
from storefront.infrastructure.cli.errors import reported_errors


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--code", default="", help="Catalog code.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--inactive", is_flag=True, default=False, help="Add as not orderable.")
@click.pass_obj
def product_add(
    data_dir: Path,
    product_id: str,
    name: str,
    price: str,
    code: str,
    description: str,
    inactive: bool,
) -> None:
    """Add a product to the catalog."""
    with reported_errors():
        if not name.strip():
            raise ValidationError("Product name is required")
        repo = product_repository(data_dir)
        if repo.get_by_id(product_id) is not None:
            raise ValidationError(f"Product '{product_id}' already exists")

        product = Product(
            id=product_id,
            name=name.strip(),
            price=Money.of(price),
            active=not inactive,
            code=code,
            description=description,
        )
        repo.save(product)

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(data_dir: Path) -> None:
    """List all products in the catalog."""
    with reported_errors():
        products = product_repository(data_dir).list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<8} {'Name':<20} {'Price':>10}  {'Active':<6}")
    click.echo("-" * 48)
    for p in products:
        click.echo(f"{p.id:<8} {p.name:<20} {str(p.price):>10}  {'yes' if p.active else 'no':<6}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New product name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--active/--inactive", default=None, help="Make orderable or not.")
@click.pass_obj
def product_update(
    data_dir: Path,
    product_id: str,
    name: str | None,
    description: str | None,
    price: str | None,
    active: bool | None,
) -> None:
    """Change a product's name, description, price or active flag.

    Existing orders keep the price they captured when placed.
    """
    with reported_errors():
        repo = product_repository(data_dir)
        product = repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        changes: dict = {}
        if name is not None:
            if not name.strip():
                raise ValidationError("Product name is required")
            changes["name"] = name.strip()
        if description is not None:
            changes["description"] = description
        if price is not None:
            changes["price"] = Money.of(price)
        if active is not None:
            changes["active"] = active
        if not changes:
            raise click.UsageError(
                "Nothing to update; pass --name, --description, --price or --active/--inactive"
            )
        repo.save(dataclasses.replace(product, **changes))

    click.echo(f"Product {product_id} updated.")
