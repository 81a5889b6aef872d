"""CLI commands for the catalog."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


@click.command("list")
@click.pass_obj
def product_list(container: Container) -> None:
    """List all products in the catalog."""
    products = container.catalog.list_products()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<40} {'Category':<10} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 107)
    for p in products:
        click.echo(f"{p.id:<36}  {p.name:<40} {p.category:<10} {p.price:>10} {p.stock:>6}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(container: Container, product_id: str) -> None:
    """Show one product with its variants."""
    try:
        product = container.catalog.get_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{product.name}  [{product.category}]")
    click.echo(f"ID:     {product.id}")
    click.echo(f"Price:  {product.price}")
    click.echo(f"Stock:  {product.stock}" + ("" if product.in_stock else "  (out of stock)"))
    click.echo(f"Image:  {product.image_url}")
    click.echo(product.description)
    for v in product.variants:
        click.echo(f"  - {v.name:<20} {v.size:<8} {v.price:>10}  ({v.id})")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 450).")
@click.option("--category", required=True, help="Category (e.g. Dairy).")
@click.option("--image-url", required=True, help="Image URL.")
@click.option("--stock", default="100", show_default=True, help="Units in stock.")
@click.option("--variants", default=None, help="Variants as a JSON list.")
@click.pass_obj
def product_add(
    container: Container,
    name: str,
    description: str,
    price: str,
    category: str,
    image_url: str,
    stock: str,
    variants: str | None,
) -> None:
    """Add a new product to the catalog."""
    payload = {
        "name": name,
        "description": description,
        "price": price,
        "category": category,
        "image_url": image_url,
        "stock": stock,
    }
    if variants is not None:
        payload["variants"] = variants

    try:
        product = container.catalog.create_product(payload)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price.")
@click.option("--category", default=None, help="New category.")
@click.option("--image-url", default=None, help="New image URL.")
@click.option("--stock", default=None, help="New stock level.")
@click.option("--variants", default=None, help="Replacement variants as a JSON list.")
@click.pass_obj
def product_update(container: Container, product_id: str, **fields: str | None) -> None:
    """Update selected fields of a product."""
    changes = {key: value for key, value in fields.items() if value is not None}
    if not changes:
        raise click.UsageError("Nothing to update; pass at least one field option.")

    try:
        container.catalog.update_product(product_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} updated: {', '.join(sorted(changes))}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(container: Container, product_id: str) -> None:
    """Remove a product from the catalog."""
    if container.catalog.delete_product(product_id):
        click.echo(f"Product {product_id} deleted.")
    else:
        click.echo(f"Product {product_id} did not exist.")
