"""Tests for settings and the composition root."""

from decimal import Decimal
from pathlib import Path

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)
from storefront.infrastructure.persistence.seed import SEED_PRODUCTS


class TestSettings:

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.storage == "memory"
        assert settings.seed_catalog is True
        assert settings.strict_transitions is False
        assert settings.verify_totals is False
        assert settings.total_tolerance == Decimal("0.01")
        assert settings.log_level == "DEBUG"

    def test_reads_environment(self):
        settings = Settings.from_env(
            {
                "STOREFRONT_ENV": "production",
                "STOREFRONT_STORAGE": "json",
                "STOREFRONT_DATA_DIR": "/srv/store",
                "STOREFRONT_STRICT_TRANSITIONS": "yes",
                "STOREFRONT_VERIFY_TOTALS": "1",
                "STOREFRONT_TOTAL_TOLERANCE": "0.05",
            }
        )
        assert settings.log_level == "INFO"
        assert settings.storage == "json"
        assert settings.data_dir == Path("/srv/store")
        assert settings.seed_catalog is False
        assert settings.strict_transitions is True
        assert settings.verify_totals is True
        assert settings.total_tolerance == Decimal("0.05")

    def test_bad_flag(self):
        with pytest.raises(ValidationError, match="STOREFRONT_VERIFY_TOTALS"):
            Settings.from_env({"STOREFRONT_VERIFY_TOTALS": "maybe"})

    def test_bad_storage(self):
        with pytest.raises(ValidationError, match="STOREFRONT_STORAGE"):
            Settings.from_env({"STOREFRONT_STORAGE": "postgres"})


class TestBuildContainer:

    def test_memory_storage_is_seeded(self):
        container = build_container(Settings(log_level="WARNING"))
        assert isinstance(container.product_repo, InMemoryProductRepository)
        assert len(container.catalog.list_products()) == len(SEED_PRODUCTS)
        assert container.orders.list_orders() == []

    def test_seeding_only_fills_an_empty_catalog(self):
        repo = InMemoryProductRepository()
        build_container(Settings(log_level="WARNING"), product_repo=repo)
        build_container(Settings(log_level="WARNING"), product_repo=repo)
        assert len(repo.list_all()) == len(SEED_PRODUCTS)

    def test_json_storage(self, tmp_path):
        container = build_container(
            Settings(storage="json", data_dir=tmp_path, seed_catalog=False, log_level="WARNING")
        )
        assert isinstance(container.product_repo, JsonProductRepository)
        assert (tmp_path / "products.json").exists()
        assert (tmp_path / "orders.json").exists()

    def test_containers_do_not_share_state(self):
        first = build_container(Settings(seed_catalog=False, log_level="WARNING"))
        second = build_container(Settings(seed_catalog=False, log_level="WARNING"))
        first.orders.create_order(
            {
                "customerName": "Asha",
                "customerEmail": "a@example.com",
                "customerPhone": "1",
                "customerAddress": "Pune",
                "items": [{"productId": "p", "productName": "P", "quantity": 1, "price": "1"}],
                "total": "1",
            }
        )
        assert len(first.orders.list_orders()) == 1
        assert second.orders.list_orders() == []
