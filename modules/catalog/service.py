"""
Catalog Module - Service Layer
================================
Read access for the storefront (list / detail / categories) and
product ingestion with variants and images as one unit.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session, selectinload

from config.settings import CATEGORIES, DEFAULT_BRAND, DEFAULT_VARIANT_STOCK
from modules.catalog.models import Product, ProductVariant, ProductImage
from modules.catalog.validators import ProductValidator, normalize_price, resolve_main_image

logger = logging.getLogger("storefront.catalog")


# ==========================================
# Product Service
# ==========================================

class ProductService:

    def _query(self, db: Session):
        return db.query(Product).options(
            selectinload(Product.variants),
            selectinload(Product.images),
        )

    def list_all(self, db: Session, category: Optional[str] = None) -> List[Product]:
        """Products with variants and images, newest first."""
        query = self._query(db)
        if category:
            query = query.filter(Product.category == category)
        return query.order_by(Product.created_at.desc(), Product.id.desc()).all()

    def get_by_id(self, db: Session, product_id: int) -> Optional[Product]:
        return self._query(db).filter(Product.id == product_id).first()

    def list_categories(self) -> List[str]:
        return list(CATEGORIES)

    def create(self, db: Session, data: Dict[str, Any]) -> Product:
        """
        Validate and stage a product with its variants and images.
        Everything is flushed together; the caller commits once,
        so a failure anywhere leaves nothing behind after rollback.
        """
        ProductValidator.validate_product_input(data)

        main_image = resolve_main_image(data)
        images = data.get("images")
        image_urls = list(images) if isinstance(images, list) and images else [main_image]

        product = Product(
            name=data["name"],
            base_price=normalize_price(data["basePrice"]),
            description=data["description"],
            image_url=main_image,
            category=data["category"],
            brand=data.get("brand") or DEFAULT_BRAND,
        )
        for v in data["variants"]:
            stock = v.get("stock")
            product.variants.append(ProductVariant(
                size=str(v["size"]),
                stock=int(stock) if stock is not None else DEFAULT_VARIANT_STOCK,
            ))
        for url in image_urls:
            product.images.append(ProductImage(url=url))

        db.add(product)
        db.flush()
        db.refresh(product)

        logger.info(
            f"Product #{product.id} staged: {product.name} "
            f"({len(product.variants)} variants, {len(product.images)} images)"
        )
        return product


# ==========================================
# Service Singletons
# ==========================================

product_service = ProductService()
