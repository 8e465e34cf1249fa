"""CLI commands for pricing product lists."""

from __future__ import annotations

import click

from catalog.application.get_total_price import GetTotalPriceHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository


def _parse_ids(raw: str) -> list[int]:
    """Parse '1,2,3' or '[1,2,3]' into a list of ids."""
    raw = raw.strip().removeprefix("[").removesuffix("]")
    ids: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        try:
            ids.append(int(part))
        except ValueError:
            raise click.BadParameter(f"Invalid product id '{part}'.")
    return ids


@click.command("total")
@click.option("--ids", required=True, help="Product ids as '1,2,2,5'.")
def price_total(ids: str) -> None:
    """Price a list of product ids, one unit per occurrence."""
    product_ids = _parse_ids(ids)
    handler = GetTotalPriceHandler(product_repo=product_repository())

    try:
        quote = handler.handle(product_ids)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"  {'ID':<6} {'Product':<20} {'Price':>10}")
    click.echo(f"  {'-'*38}")
    for p in quote.products:
        click.echo(f"  {p.id:<6} {p.name:<20} {p.price:>10.2f}")
    click.echo(f"  {'-'*38}")
    click.echo(f"  {'Total':<27} {quote.total_price:>10.2f}")
