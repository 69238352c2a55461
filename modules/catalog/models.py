"""
Catalog Module - Models
========================
Product, ProductVariant (size + stock) and ProductImage.
"""

import enum
from sqlalchemy import (
    Column, Integer, String, Text, Numeric,
    ForeignKey, DateTime, CheckConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from config.database import Base
from config.settings import DEFAULT_BRAND, DEFAULT_VARIANT_STOCK
from common.helpers import isoformat


# ==========================================
# 🗂️ Product Category
# ==========================================

class ProductCategory(str, enum.Enum):
    SHOES = "shoes"        # numeric sizes (38, 42.5, ...)
    CLOTHING = "clothing"  # XS .. XL


# ==========================================
# 📦 Product
# ==========================================

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    base_price = Column(Numeric(10, 2), nullable=False)
    image_url = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    brand = Column(String, default=DEFAULT_BRAND, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    variants = relationship(
        "ProductVariant", back_populates="product",
        cascade="all, delete-orphan", order_by="ProductVariant.id",
    )
    images = relationship(
        "ProductImage", back_populates="product",
        cascade="all, delete-orphan", order_by="ProductImage.id",
    )

    __table_args__ = (
        CheckConstraint("base_price > 0", name="ck_product_price_positive"),
    )

    @property
    def default_image(self):
        if self.image_url:
            return self.image_url
        return self.images[0].url if self.images else None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "basePrice": float(self.base_price),
            "imageUrl": self.default_image,
            "category": self.category,
            "brand": self.brand,
            "createdAt": isoformat(self.created_at),
            "variants": [v.to_dict() for v in self.variants],
            "images": [img.to_dict() for img in self.images],
        }

    def __repr__(self):
        return f"<Product {self.name} ({self.category})>"


# ==========================================
# 📏 Variant (size / stock)
# ==========================================

class ProductVariant(Base):
    __tablename__ = "product_variants"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    size = Column(String, nullable=False)
    stock = Column(Integer, default=DEFAULT_VARIANT_STOCK, nullable=False)

    product = relationship("Product", back_populates="variants")

    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_variant_stock"),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "productId": self.product_id,
            "size": self.size,
            "stock": self.stock,
        }


# ==========================================
# 🖼️ Image
# ==========================================

class ProductImage(Base):
    __tablename__ = "product_images"

    id = Column(Integer, primary_key=True)
    url = Column(String, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)

    product = relationship("Product", back_populates="images")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "productId": self.product_id,
            "url": self.url,
        }
