"""
Storefront Module - Client-side Data Model
============================================
Immutable snapshots of catalog data as received from the REST API,
plus the CartLine entity owned by the cart engine.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from config.settings import DEFAULT_BRAND
from common.helpers import parse_datetime, safe_decimal


@dataclass(frozen=True)
class Variant:
    """One purchasable size/stock combination of a product."""
    id: int
    product_id: int
    size: str
    stock: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Variant":
        return cls(
            id=int(data["id"]),
            product_id=int(data["productId"]),
            size=str(data["size"]),
            stock=int(data.get("stock") or 0),
        )


@dataclass(frozen=True)
class Image:
    id: int
    product_id: int
    url: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Image":
        return cls(id=int(data["id"]), product_id=int(data["productId"]), url=data["url"])


@dataclass(frozen=True)
class Product:
    """Read-only catalog entry; the cart never modifies it."""
    id: int
    name: str
    base_price: Decimal
    description: str = ""
    image_url: Optional[str] = None
    category: str = ""
    brand: str = DEFAULT_BRAND
    created_at: Optional[datetime] = None
    variants: Tuple[Variant, ...] = ()
    images: Tuple[Image, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        return cls(
            id=int(data["id"]),
            name=data["name"],
            base_price=safe_decimal(data.get("basePrice"), Decimal("0")),
            description=data.get("description") or "",
            image_url=data.get("imageUrl"),
            category=data.get("category") or "",
            brand=data.get("brand") or DEFAULT_BRAND,
            created_at=parse_datetime(data.get("createdAt")),
            variants=tuple(Variant.from_dict(v) for v in data.get("variants") or []),
            images=tuple(Image.from_dict(i) for i in data.get("images") or []),
        )

    @property
    def main_image(self) -> Optional[str]:
        if self.image_url:
            return self.image_url
        return self.images[0].url if self.images else None

    @property
    def total_stock(self) -> int:
        return sum(v.stock for v in self.variants)

    @property
    def in_stock(self) -> bool:
        return any(v.stock > 0 for v in self.variants)

    def find_variant(self, size: str) -> Optional[Variant]:
        for v in self.variants:
            if v.size == size:
                return v
        return None


@dataclass(frozen=True)
class CartLine:
    """
    One cart entry. Price, image and max_stock are snapshots taken when
    the line was created; the stock ceiling itself is re-checked live.
    """
    cart_id: str
    product_id: int
    product_name: str
    price: Decimal
    image_url: Optional[str]
    size: str
    quantity: int
    variant_id: int
    max_stock: int

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class CartResult:
    """Outcome of a cart mutation, shown inline to the shopper."""
    success: bool
    message: str = ""


@dataclass(frozen=True)
class CatalogSnapshot:
    """What the catalog cache exposes to views in one read."""
    products: Tuple[Product, ...] = ()
    categories: Tuple[str, ...] = ()
    selected_category: Optional[str] = None
    loading: bool = False
    error: Optional[str] = None
    fetched_at: Optional[datetime] = None
