import os

import click

from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.cli.order_commands import (
    order_list,
    order_place,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging_setup import configure_logging


@click.group()
@click.option(
    "--storage",
    type=click.Choice(["json", "memory"]),
    default="json",
    show_default=True,
    help="Where catalog and orders are kept.",
)
@click.pass_context
def cli(ctx: click.Context, storage: str) -> None:
    """Storefront: catalog and order back office"""
    if ctx.obj is None:
        settings = Settings.from_env({**os.environ, "STOREFRONT_STORAGE": storage})
        configure_logging(settings.log_level, settings.environment)
        ctx.obj = build_container(settings)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.command("dashboard")
@click.pass_obj
def dashboard(container: Container) -> None:
    """Show sales figures."""
    dto = container.dashboard.handle()
    click.echo(f"Total sales:   {dto.total_sales}")
    click.echo(f"Total orders:  {dto.total_orders}")
    click.echo(f"Orders today:  {dto.today_orders}")
    click.echo()
    click.echo("Last 7 days:")
    for day in dto.daily_sales:
        click.echo(f"  {day.day}  {day.sales:>12}")
    if dto.recent_orders:
        click.echo()
        click.echo("Recent orders:")
        for o in dto.recent_orders:
            click.echo(f"  {o.id}  {o.customer_name:<24} {o.status.value:<10} {o.total:>10}")


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
@click.pass_obj
def serve(container: Container, host: str, port: int) -> None:
    """Run the HTTP API."""
    import uvicorn

    from storefront.infrastructure.api import create_app

    uvicorn.run(create_app(container=container), host=host, port=port)


# Register subcommands
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
