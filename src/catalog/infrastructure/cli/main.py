import logging

import click

from catalog.infrastructure.cli.pricing_commands import price_total
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_patch,
    product_show,
    product_update,
)
from catalog.infrastructure.config import Settings


@click.group()
def cli() -> None:
    """Catalog: product records kept in a JSON file"""
    logging.basicConfig(level=Settings().log_level)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def price() -> None:
    """Price product lists."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_patch)
product.add_command(product_show)
product.add_command(product_update)
price.add_command(price_total)
