"""Tests for the click CLI, run against an in-memory container."""

import pytest
from click.testing import CliRunner

from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.cli.main import cli
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from storefront.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)
from tests.fakes import StepClock, product_input


@pytest.fixture()
def container():
    return build_container(
        Settings(seed_catalog=False, log_level="WARNING"),
        product_repo=InMemoryProductRepository(),
        order_repo=InMemoryOrderRepository(clock=StepClock()),
    )


def _run(container, *args):
    return CliRunner().invoke(cli, list(args), obj=container)


class TestProductCommands:

    def test_list_empty(self, container):
        result = _run(container, "product", "list")
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_add_then_list(self, container):
        result = _run(
            container,
            "product", "add",
            "--name", "Mustard Oil",
            "--description", "Cold-pressed.",
            "--price", "290",
            "--category", "Oils",
            "--image-url", "/images/oil.png",
            "--variants", '[{"id": "oil-1l", "name": "1 Litre", "price": "290", "size": "1L"}]',
        )
        assert result.exit_code == 0, result.output
        assert "'Mustard Oil' added at 290" in result.output

        listing = _run(container, "product", "list")
        assert "Mustard Oil" in listing.output

    def test_add_invalid_price(self, container):
        result = _run(
            container,
            "product", "add",
            "--name", "Oil",
            "--description", "d",
            "--price", "lots",
            "--category", "Oils",
            "--image-url", "/x.png",
        )
        assert result.exit_code != 0
        assert "Price must be a non-negative amount" in result.output

    def test_update_and_show(self, container):
        product = container.product_repo.create(product_input())
        result = _run(container, "product", "update", "--id", product.id, "--stock", "0")
        assert result.exit_code == 0, result.output

        shown = _run(container, "product", "show", "--id", product.id)
        assert "out of stock" in shown.output
        assert "ghee-1kg" in shown.output

    def test_update_without_fields(self, container):
        product = container.product_repo.create(product_input())
        result = _run(container, "product", "update", "--id", product.id)
        assert result.exit_code != 0
        assert "Nothing to update" in result.output

    def test_delete(self, container):
        product = container.product_repo.create(product_input())
        assert "deleted" in _run(container, "product", "delete", "--id", product.id).output
        assert "did not exist" in _run(container, "product", "delete", "--id", product.id).output


class TestOrderCommands:

    def _place(self, container, *items):
        args = [
            "order", "place",
            "--name", "Asha",
            "--email", "asha@example.com",
            "--phone", "12345",
            "--address", "Pune",
        ]
        for item in items:
            args += ["--item", item]
        return _run(container, *args)

    def test_place_order(self, container):
        a = container.product_repo.create(product_input(name="Product A", price="10.00", variants=()))
        b = container.product_repo.create(product_input(name="Product B", price="5.50", variants=()))

        result = self._place(container, f"{a.id}=2", f"{b.id}=1")

        assert result.exit_code == 0, result.output
        assert "status=pending" in result.output
        assert "25.50" in result.output
        assert container.order_repo.list_all()[0].total == "25.50"

    def test_place_with_variant(self, container):
        ghee = container.product_repo.create(product_input())
        result = self._place(container, f"{ghee.id}:ghee-1kg=1")
        assert result.exit_code == 0, result.output
        assert container.order_repo.list_all()[0].items[0].price == "1800"

    def test_bad_item_format(self, container):
        result = self._place(container, "no-quantity")
        assert result.exit_code != 0
        assert "Invalid item format" in result.output

    def test_status_and_show(self, container):
        ghee = container.product_repo.create(product_input())
        self._place(container, f"{ghee.id}=1")
        order = container.order_repo.list_all()[0]

        result = _run(container, "order", "status", "--id", order.id, "--status", "shipped")
        assert result.exit_code == 0, result.output
        assert "status=shipped" in _run(container, "order", "show", "--id", order.id).output

    def test_status_rejects_unknown_value(self, container):
        result = _run(container, "order", "status", "--id", "x", "--status", "lost")
        assert result.exit_code != 0

    def test_show_unknown(self, container):
        result = _run(container, "order", "show", "--id", "missing")
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_list_and_dashboard(self, container):
        ghee = container.product_repo.create(product_input())
        self._place(container, f"{ghee.id}=2")

        assert "Asha" in _run(container, "order", "list").output
        dashboard = _run(container, "dashboard")
        assert "Total sales:   900.00" in dashboard.output
        assert "Total orders:  1" in dashboard.output
