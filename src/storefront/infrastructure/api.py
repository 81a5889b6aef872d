"""FastAPI boundary for the storefront.

Translates HTTP requests into service calls and service results back into
JSON. Request schemas only describe the shape of the wire format; the
services do the real validation.

Usage:
    uvicorn storefront.infrastructure.api:create_app --factory --port 8000
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from storefront.application.dto import order_to_dict, product_to_dict
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging_setup import configure_logging

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------
class VariantSchema(BaseModel):
    id: str
    name: str
    price: str
    size: str


class ProductCreateRequest(BaseModel):
    name: str
    description: str
    price: str
    category: str
    imageUrl: str
    stock: str = "100"
    # a list, or the JSON text of one
    variants: list[VariantSchema] | str = Field(default_factory=list)


class ProductUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    description: str | None = None
    price: str | None = None
    category: str | None = None
    imageUrl: str | None = None
    stock: str | None = None
    variants: list[VariantSchema] | str | None = None


class LineItemSchema(BaseModel):
    productId: str
    productName: str
    quantity: int = Field(ge=1)
    price: str


class OrderCreateRequest(BaseModel):
    customerName: str
    customerEmail: str
    customerPhone: str
    customerAddress: str
    items: list[LineItemSchema] | str
    total: str
    status: str | None = None


class StatusUpdateRequest(BaseModel):
    status: str


def get_container(request: Request) -> Container:
    return request.app.state.container


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/api/products", tags=["products"])


@product_router.get("")
def list_products(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    return [product_to_dict(p) for p in container.catalog.list_products()]


@product_router.get("/{product_id}")
def get_product(product_id: str, container: Container = Depends(get_container)) -> dict[str, Any]:
    return product_to_dict(container.catalog.get_product(product_id))


@product_router.post("", status_code=201)
def create_product(
    body: ProductCreateRequest, container: Container = Depends(get_container)
) -> dict[str, Any]:
    product = container.catalog.create_product(body.model_dump())
    return product_to_dict(product)


@product_router.patch("/{product_id}")
def update_product(
    product_id: str,
    body: ProductUpdateRequest,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    changes = body.model_dump(exclude_unset=True)
    return product_to_dict(container.catalog.update_product(product_id, changes))


@product_router.delete("/{product_id}")
def delete_product(product_id: str, container: Container = Depends(get_container)) -> dict[str, bool]:
    return {"deleted": container.catalog.delete_product(product_id)}


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/api/orders", tags=["orders"])


@order_router.get("")
def list_orders(container: Container = Depends(get_container)) -> list[dict[str, Any]]:
    return [order_to_dict(o) for o in container.orders.list_orders()]


@order_router.get("/{order_id}")
def get_order(order_id: str, container: Container = Depends(get_container)) -> dict[str, Any]:
    return order_to_dict(container.orders.get_order(order_id))


@order_router.post("", status_code=201)
def create_order(
    body: OrderCreateRequest, container: Container = Depends(get_container)
) -> dict[str, Any]:
    return order_to_dict(container.orders.create_order(body.model_dump(exclude_none=True)))


@order_router.patch("/{order_id}")
def update_order_status(
    order_id: str,
    body: StatusUpdateRequest,
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    return order_to_dict(container.orders.update_status(order_id, body.status))


# ---------------------------------------------------------------------------
# Dashboard Router
# ---------------------------------------------------------------------------
dashboard_router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@dashboard_router.get("")
def show_dashboard(container: Container = Depends(get_container)) -> dict[str, Any]:
    dto = container.dashboard.handle()
    return {
        "totalSales": dto.total_sales,
        "totalOrders": dto.total_orders,
        "todayOrders": dto.today_orders,
        "recentOrders": [order_to_dict(o) for o in dto.recent_orders],
        "dailySales": [{"day": d.day, "sales": d.sales} for d in dto.daily_sales],
    }


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------
def _not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


def _invalid(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("request_rejected", path=request.url.path, reason=str(exc))
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
def create_app(
    settings: Settings | None = None,
    container: Container | None = None,
) -> FastAPI:
    settings = settings or (container.settings if container else Settings.from_env())
    configure_logging(settings.log_level, settings.environment)

    app = FastAPI(title="Storefront API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.container = container or build_container(settings)

    app.add_exception_handler(EntityNotFoundError, _not_found)
    app.add_exception_handler(ValidationError, _invalid)

    app.include_router(product_router)
    app.include_router(order_router)
    app.include_router(dashboard_router)
    return app
