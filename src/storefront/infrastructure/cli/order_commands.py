"""CLI commands for orders."""

from __future__ import annotations

import click

from storefront.application.dto import CustomerDetails
from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order, OrderStatus
from storefront.infrastructure.bootstrap import Container


def _parse_items(raw: tuple[str, ...]) -> Cart:
    """Parse 'PRODUCT_ID[:VARIANT_ID]=QTY' entries into a cart."""
    cart = Cart()
    for entry in raw:
        if "=" not in entry:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'ProductId[:VariantId]=Quantity'."
            )
        ref, qty_str = entry.rsplit("=", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid quantity '{qty_str}' for '{ref}'.")
        product_id, _, variant_id = ref.strip().partition(":")
        try:
            cart.add(product_id, qty, variant_id or None)
        except DomainException as exc:
            raise click.BadParameter(str(exc))
    return cart


def _display_order(order: Order) -> None:
    click.echo(f"Order {order.id}  (status={order.status.value})")
    click.echo(f"Customer: {order.customer_name} <{order.customer_email}>, {order.customer_phone}")
    click.echo(f"Ship to:  {order.customer_address}")
    click.echo(f"Created:  {order.created_at.strftime('%Y-%m-%d %H:%M %Z')}")
    click.echo()
    click.echo(f"  {'Product':<40} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*67}")
    for item in order.items:
        click.echo(
            f"  {item.product_name:<40} {item.quantity:>5} {item.price:>10} "
            f"{item.line_total.to_text():>10}"
        )
    click.echo(f"  {'-'*67}")
    click.echo(f"  {'Order Total':<40} {order.total:>27}")


@click.command("place")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--phone", required=True, help="Customer phone.")
@click.option("--address", required=True, help="Delivery address.")
@click.option(
    "--item",
    "items",
    required=True,
    multiple=True,
    help="Cart line as 'ProductId[:VariantId]=Qty'; repeatable.",
)
@click.pass_obj
def order_place(
    container: Container,
    name: str,
    email: str,
    phone: str,
    address: str,
    items: tuple[str, ...],
) -> None:
    """Check out a cart and place an order."""
    cart = _parse_items(items)
    customer = CustomerDetails(name=name, email=email, phone=phone, address=address)

    try:
        order = container.checkout.handle(cart, customer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(order)


@click.command("list")
@click.pass_obj
def order_list(container: Container) -> None:
    """List orders, newest first."""
    orders = container.orders.list_orders()
    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<36}  {'Created':<16} {'Customer':<24} {'Status':<10} {'Total':>10}")
    click.echo("-" * 100)
    for o in orders:
        click.echo(
            f"{o.id:<36}  {o.created_at.strftime('%Y-%m-%d %H:%M'):<16} "
            f"{o.customer_name:<24} {o.status.value:<10} {o.total:>10}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(container: Container, order_id: str) -> None:
    """Show details of an existing order."""
    try:
        order = container.orders.get_order(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(order)


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option(
    "--status",
    required=True,
    type=click.Choice(OrderStatus.values()),
    help="New status.",
)
@click.pass_obj
def order_status(container: Container, order_id: str, status: str) -> None:
    """Move an order to a new status."""
    try:
        container.orders.update_status(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} is now {status}.")
