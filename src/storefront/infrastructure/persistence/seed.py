"""Demo catalog loaded into an empty store at startup."""

from __future__ import annotations

import structlog

from storefront.domain.model.product import ProductInput, ProductVariant
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


def _variants(prefix: str, *rows: tuple[str, str, str]) -> tuple[ProductVariant, ...]:
    return tuple(
        ProductVariant(id=f"{prefix}-{size.lower()}", name=name, price=price, size=size)
        for name, price, size in rows
    )


SEED_PRODUCTS: tuple[ProductInput, ...] = (
    ProductInput(
        name="Premium Ghee (घी)",
        description="Pure, golden ghee made from grass-fed cow's milk.",
        price="450",
        category="Dairy",
        image_url="/images/frosteva_ghee_250g_bilingual_packaging.png",
        stock="50",
        variants=_variants(
            "ghee", ("250g", "450", "250g"), ("500g", "900", "500g"), ("1kg", "1800", "1kg")
        ),
    ),
    ProductInput(
        name="Fresh Curd (दही)",
        description="Creamy, smooth curd made fresh daily.",
        price="50",
        category="Dairy",
        image_url="/images/frosteva_curd_bilingual_nutrition_label.png",
        stock="75",
        variants=_variants(
            "curd",
            ("400g (1 serving)", "50", "400g"),
            ("800g (2 servings)", "100", "800g"),
            ("1kg (2.5 servings)", "125", "1kg"),
        ),
    ),
    ProductInput(
        name="Farm Fresh Milk (दूध)",
        description="Pure, fresh milk from local dairy farms.",
        price="60",
        category="Dairy",
        image_url="/images/frosteva_milk_1l_bilingual_label.png",
        stock="100",
        variants=_variants(
            "milk", ("500ml", "30", "500ml"), ("1 Litre", "60", "1L"), ("1.5 Litre", "90", "1.5L")
        ),
    ),
    ProductInput(
        name="Cold-Pressed Mustard Oil (सरसों का तेल)",
        description="100% cold-pressed mustard oil for cooking and traditional recipes.",
        price="290",
        category="Oils",
        image_url="/images/frosteva_mustard_oil_1l_bilingual.png",
        stock="60",
        variants=_variants(
            "oil", ("500ml", "145", "500ml"), ("1 Litre", "290", "1L"), ("2 Litre", "550", "2L")
        ),
    ),
    ProductInput(
        name="Crunchy Peanut Butter (मूंगफली का मक्खन)",
        description="All-natural peanut butter with real peanut chunks. No added sugar.",
        price="320",
        category="Spreads",
        image_url="/images/frosteva_peanut_butter_500g_bilingual.png",
        stock="80",
        variants=_variants(
            "peanut-crunchy", ("250g", "160", "250g"), ("500g", "320", "500g"), ("1kg", "640", "1kg")
        ),
    ),
    ProductInput(
        name="Smooth Peanut Butter (मूंगफली का मक्खन)",
        description="Silky smooth peanut butter made from premium roasted peanuts.",
        price="320",
        category="Spreads",
        image_url="/images/frosteva_peanut_butter_500g_bilingual.png",
        stock="85",
        variants=_variants(
            "peanut-smooth", ("250g", "160", "250g"), ("500g", "320", "500g"), ("1kg", "640", "1kg")
        ),
    ),
    ProductInput(
        name="Chocolate Peanut Butter (चॉकलेट मूंगफली मक्खन)",
        description="Rich cocoa blended with creamy peanuts.",
        price="360",
        category="Spreads",
        image_url="/images/frosteva_peanut_butter_500g_bilingual.png",
        stock="70",
        variants=_variants(
            "peanut-choco", ("250g", "180", "250g"), ("500g", "360", "500g"), ("1kg", "720", "1kg")
        ),
    ),
)


def seed_catalog(repo: ProductRepository) -> int:
    """Load the demo catalog if the repository is empty; return how many were added."""
    if repo.list_all():
        return 0
    for data in SEED_PRODUCTS:
        repo.create(data)
    logger.info("catalog_seeded", count=len(SEED_PRODUCTS))
    return len(SEED_PRODUCTS)
