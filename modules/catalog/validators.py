"""
Catalog Module - Input Validation
===================================
Rules for POST /products, checked in a fixed order.
The first failing rule raises ProductValidationError(error, details).
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Optional

from config.settings import CATEGORIES, CLOTHING_SIZES, MAX_BASE_PRICE, PRICE_QUANTUM
from common.exceptions import ProductValidationError
from common.helpers import is_numeric, safe_decimal
from modules.catalog.models import ProductCategory


def _is_text(value) -> bool:
    return isinstance(value, str) and value != ""


def resolve_main_image(data: Dict[str, Any]) -> Optional[str]:
    """Explicit imageUrl, else the first entry of images."""
    if _is_text(data.get("imageUrl")):
        return data["imageUrl"]
    images = data.get("images")
    if isinstance(images, list) and images and _is_text(images[0]):
        return images[0]
    return None


def normalize_price(value) -> Optional[Decimal]:
    """Price rounded to cents, or None if it is not storable as a positive amount."""
    price = safe_decimal(value)
    # compare before quantize: huge exponents overflow the decimal context
    if price is None or price > MAX_BASE_PRICE:
        return None
    price = price.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    if price <= 0 or price > MAX_BASE_PRICE:
        return None
    return price


def _is_valid_stock(stock) -> bool:
    if isinstance(stock, bool) or not isinstance(stock, (int, float)):
        return False
    if isinstance(stock, float) and not stock.is_integer():
        return False
    return stock >= 0


class ProductValidator:

    @staticmethod
    def validate_product_input(data: Dict[str, Any]) -> None:
        """Raise ProductValidationError on the first broken rule."""
        if not isinstance(data, dict):
            raise ProductValidationError("Invalid request body", "Expected a JSON object")

        # 1. Required fields
        if (
            not _is_text(data.get("name"))
            or data.get("basePrice") is None
            or not _is_text(data.get("description"))
            or not resolve_main_image(data)
            or not data.get("category")
        ):
            raise ProductValidationError(
                "Missing required fields",
                "Name, price, description, image, and category are required",
            )

        images = data.get("images")
        if images is not None and (
            not isinstance(images, list) or not all(_is_text(url) for url in images)
        ):
            raise ProductValidationError(
                "Invalid images",
                "Images must be a list of image URLs",
            )

        brand = data.get("brand")
        if brand not in (None, "") and not isinstance(brand, str):
            raise ProductValidationError("Invalid brand", "Brand must be a string")

        # 2. Category
        category = data["category"]
        if category not in CATEGORIES:
            raise ProductValidationError(
                "Invalid category",
                f"Category must be one of: {', '.join(CATEGORIES)}",
            )

        # 3. Price
        if normalize_price(data["basePrice"]) is None:
            raise ProductValidationError(
                "Invalid price",
                f"Price must be a number greater than 0 and at most {MAX_BASE_PRICE}"
                " (rounded to 2 decimals)",
            )

        # 4. Variants present
        variants = data.get("variants")
        if not isinstance(variants, list) or not variants:
            raise ProductValidationError(
                "Invalid variants",
                "At least one variant (size/stock) is required",
            )

        # 5. Per-variant rules
        for variant in variants:
            if not isinstance(variant, dict):
                raise ProductValidationError(
                    "Invalid variants",
                    "Each variant must be an object with size and stock",
                )
            size = variant.get("size")

            if category == ProductCategory.SHOES.value:
                if not is_numeric(size):
                    raise ProductValidationError(
                        "Invalid shoe size",
                        f"Shoe sizes must be numeric. Invalid: {size}",
                    )
            elif category == ProductCategory.CLOTHING.value:
                if size not in CLOTHING_SIZES:
                    raise ProductValidationError(
                        "Invalid clothing size",
                        f"Clothing sizes must be one of: {', '.join(CLOTHING_SIZES)}. Invalid: {size}",
                    )

            stock = variant.get("stock")
            if stock is not None and not _is_valid_stock(stock):
                raise ProductValidationError(
                    "Invalid stock quantity",
                    f"Stock must be a non-negative number. Invalid variant: {size}",
                )
