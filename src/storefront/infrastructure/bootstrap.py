"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Repositories are built once per application and handed to the services
that need them; nothing reaches them through a module-level global.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from storefront.application.catalog_service import CatalogService
from storefront.application.checkout import CheckoutHandler
from storefront.application.order_service import OrderService
from storefront.application.show_dashboard import ShowDashboardHandler
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from storefront.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)
from storefront.infrastructure.persistence.seed import seed_catalog

logger = structlog.get_logger(__name__)


@dataclass
class Container:
    settings: Settings
    product_repo: ProductRepository
    order_repo: OrderRepository
    catalog: CatalogService
    orders: OrderService
    checkout: CheckoutHandler
    dashboard: ShowDashboardHandler


def build_repositories(settings: Settings) -> tuple[ProductRepository, OrderRepository]:
    if settings.storage == "json":
        return (
            JsonProductRepository(settings.data_dir / "products.json"),
            JsonOrderRepository(settings.data_dir / "orders.json"),
        )
    return InMemoryProductRepository(), InMemoryOrderRepository()


def build_container(
    settings: Settings | None = None,
    product_repo: ProductRepository | None = None,
    order_repo: OrderRepository | None = None,
) -> Container:
    settings = settings or Settings.from_env()
    if product_repo is None or order_repo is None:
        default_products, default_orders = build_repositories(settings)
        product_repo = product_repo or default_products
        order_repo = order_repo or default_orders

    if settings.seed_catalog:
        seed_catalog(product_repo)

    orders = OrderService(
        order_repo,
        product_repo,
        strict_transitions=settings.strict_transitions,
        verify_totals=settings.verify_totals,
        total_tolerance=settings.total_tolerance,
    )
    logger.debug(
        "container_built",
        storage=settings.storage,
        strict_transitions=settings.strict_transitions,
        verify_totals=settings.verify_totals,
    )
    return Container(
        settings=settings,
        product_repo=product_repo,
        order_repo=order_repo,
        catalog=CatalogService(product_repo),
        orders=orders,
        checkout=CheckoutHandler(product_repo, orders),
        dashboard=ShowDashboardHandler(order_repo),
    )
