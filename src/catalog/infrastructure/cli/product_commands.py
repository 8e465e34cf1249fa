"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ProductDTO
from catalog.application.list_products import ListProductsHandler
from catalog.application.mapping import to_dto
from catalog.application.modify_product import ModifyProductHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product, ProductKey, ProductPatch
from catalog.infrastructure.bootstrap import product_repository


def _resolve_key(product_id: int | None, code_key: str | None) -> ProductKey:
    if (product_id is None) == (code_key is None):
        raise click.UsageError("Pass exactly one of --id or --key.")
    return product_id if product_id is not None else code_key


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}  {dto.name}")
    click.echo(f"  code_value:   {dto.code_value}")
    click.echo(f"  quantity:     {dto.quantity}")
    click.echo(f"  price:        {dto.price:.2f}")
    click.echo(f"  expiration:   {dto.expiration}")
    click.echo(f"  is_published: {str(dto.is_published).lower()}")


@click.command("list")
@click.option("--price-gt", type=float, help="Only products pricier than this.")
def product_list(price_gt: float | None) -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        if price_gt is None:
            products = handler.handle()
        else:
            products = handler.search_by_price_gt(price_gt)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Code':<12} {'Name':<20} {'Qty':>6} {'Price':>10} {'Expires':>12} Pub")
    click.echo("-" * 76)
    for p in products:
        published = "yes" if p.is_published else "no"
        click.echo(
            f"{p.id:<6} {p.code_value:<12} {p.name:<20} {p.quantity:>6} "
            f"{p.price:>10.2f} {p.expiration:>12} {published}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--code-value", required=True, help="Unique product code.")
@click.option("--expiration", required=True, help="Expiration date (DD/MM/YYYY).")
@click.option("--price", required=True, type=float, help="Unit price (e.g. 15.00).")
@click.option("--published/--unpublished", default=False, help="Publication state.")
def product_add(
    name: str,
    quantity: int,
    code_value: str,
    expiration: str,
    price: float,
    published: bool,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())
    candidate = Product(
        id=0,
        name=name,
        quantity=quantity,
        code_value=code_value,
        expiration=expiration,
        price=price,
        is_published=published,
    )

    try:
        product_id = handler.handle(candidate)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} '{name}' added at {price:.2f}")


@click.command("update")
@click.option("--id", "product_id", type=int, help="Product ID.")
@click.option("--key", "code_key", help="Code value of the product.")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--code-value", required=True, help="Unique product code.")
@click.option("--expiration", required=True, help="Expiration date (DD/MM/YYYY).")
@click.option("--price", required=True, type=float, help="Unit price.")
@click.option("--published/--unpublished", default=False, help="Publication state.")
def product_update(
    product_id: int | None,
    code_key: str | None,
    name: str,
    quantity: int,
    code_value: str,
    expiration: str,
    price: float,
    published: bool,
) -> None:
    """Replace every field of a product."""
    key = _resolve_key(product_id, code_key)
    handler = UpdateProductHandler(product_repo=product_repository())
    candidate = Product(
        id=0,
        name=name,
        quantity=quantity,
        code_value=code_value,
        expiration=expiration,
        price=price,
        is_published=published,
    )

    try:
        product = handler.handle(key, candidate)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(to_dto(product))


@click.command("patch")
@click.option("--id", "product_id", type=int, help="Product ID.")
@click.option("--key", "code_key", help="Code value of the product.")
@click.option("--name", default="", help="New name.")
@click.option("--quantity", default=0, type=int, help="New stock level.")
@click.option("--code-value", default="", help="New product code.")
@click.option("--expiration", default="", help="New expiration (DD/MM/YYYY).")
@click.option("--price", default=0.0, type=float, help="New unit price.")
@click.option("--published", type=click.BOOL, default=None, help="New publication state (true/false).")
def product_patch(
    product_id: int | None,
    code_key: str | None,
    name: str,
    quantity: int,
    code_value: str,
    expiration: str,
    price: float,
    published: bool | None,
) -> None:
    """Change only the given fields of a product."""
    key = _resolve_key(product_id, code_key)
    handler = ModifyProductHandler(product_repo=product_repository())
    patch = ProductPatch(
        name=name,
        quantity=quantity,
        code_value=code_value,
        expiration=expiration,
        price=price,
        is_published=published,
    )

    try:
        product = handler.handle(key, patch)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(to_dto(product))


@click.command("delete")
@click.option("--id", "product_id", type=int, help="Product ID.")
@click.option("--key", "code_key", help="Code value of the product.")
def product_delete(product_id: int | None, code_key: str | None) -> None:
    """Remove a product from the catalog."""
    key = _resolve_key(product_id, code_key)
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(key)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {key} deleted")
