"""
Storefront Module - Catalog Cache
===================================
Holds the last-fetched product list (for the selected category) and the
category list. Feeds the product grid and the cart engine's stock lookups.

Fetch failures are logged and kept in `error`; the previous list stays
in place and nothing is retried automatically.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from config.settings import SORT_OPTIONS
from common.helpers import now_utc
from modules.storefront.client import StorefrontAPIClient, StorefrontAPIError
from modules.storefront.models import CatalogSnapshot, Product

logger = logging.getLogger("storefront.catalog")

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _created_key(product: Product) -> datetime:
    created = product.created_at
    if created is None:
        return _EPOCH
    if created.tzinfo is None:
        return created.replace(tzinfo=timezone.utc)
    return created


class CatalogCache:

    def __init__(self, client: StorefrontAPIClient, category: Optional[str] = None):
        self.client = client
        self.selected_category: Optional[str] = category or None
        self.products: List[Product] = []
        self.categories: List[str] = []
        self.loading = False
        self.error: Optional[str] = None
        self.fetched_at: Optional[datetime] = None

    # ==========================================
    # Fetching
    # ==========================================

    def refresh(self) -> bool:
        """Re-fetch products for the selected category. Returns True on success."""
        self.loading = True
        self.error = None
        try:
            self.products = self.client.get_products(self.selected_category)
            self.fetched_at = now_utc()
            return True
        except StorefrontAPIError as e:
            self.error = e.message
            logger.error(f"Error fetching products: {e.message}")
            return False
        finally:
            self.loading = False

    def load_categories(self) -> bool:
        self.loading = True
        self.error = None
        try:
            self.categories = self.client.get_categories()
            return True
        except StorefrontAPIError as e:
            self.error = e.message
            logger.error(f"Error fetching categories: {e.message}")
            return False
        finally:
            self.loading = False

    def select_category(self, category: Optional[str]) -> bool:
        """Switch category; only re-fetches when it actually changed."""
        category = category or None
        if category == self.selected_category and self.fetched_at is not None:
            return True
        self.selected_category = category
        return self.refresh()

    # ==========================================
    # Derived views (pure, never mutate self.products)
    # ==========================================

    def find_product(self, product_id: int) -> Optional[Product]:
        for p in self.products:
            if p.id == product_id:
                return p
        return None

    def in_stock_only(self, products: Optional[List[Product]] = None) -> List[Product]:
        source = self.products if products is None else products
        return [p for p in source if p.in_stock]

    def sorted_by(self, sort: str = "", products: Optional[List[Product]] = None) -> List[Product]:
        source = self.products if products is None else products
        if sort not in SORT_OPTIONS:
            raise ValueError(f"Unknown sort option: {sort}")
        if sort == "price-asc":
            return sorted(source, key=lambda p: p.base_price)
        if sort == "price-desc":
            return sorted(source, key=lambda p: p.base_price, reverse=True)
        if sort == "date-desc":
            return sorted(source, key=_created_key, reverse=True)
        if sort == "date-asc":
            return sorted(source, key=_created_key)
        return list(source)

    def visible_products(self, sort: str = "", in_stock: bool = False) -> List[Product]:
        """What the product grid shows for the current filter/sort choice."""
        products = self.in_stock_only() if in_stock else list(self.products)
        return self.sorted_by(sort, products)

    def snapshot(self) -> CatalogSnapshot:
        return CatalogSnapshot(
            products=tuple(self.products),
            categories=tuple(self.categories),
            selected_category=self.selected_category,
            loading=self.loading,
            error=self.error,
            fetched_at=self.fetched_at,
        )
