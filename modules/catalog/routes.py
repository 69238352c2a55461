"""
Catalog Module - REST API Routes
==================================
Stateless JSON API consumed by the storefront client.

Endpoints:
  GET  /products        — Product list (optional ?category=), newest first
  GET  /products/{id}   — Single product with variants + images
  POST /products        — Create product with variants + images
  GET  /categories      — Fixed category labels
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from config.database import get_db
from common.exceptions import StorefrontError, NotFoundError
from common.helpers import safe_int
from modules.catalog.service import product_service

logger = logging.getLogger("storefront.api")

router = APIRouter(tags=["catalog"])


# ==========================================
# GET /products
# ==========================================

@router.get("/products")
async def list_products(
    category: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """All products, optionally filtered by category."""
    products = product_service.list_all(db, category=category or None)
    return [p.to_dict() for p in products]


# ==========================================
# GET /products/{id}
# ==========================================

@router.get("/products/{product_id}")
async def get_product(product_id: str, db: Session = Depends(get_db)):
    """Product detail. Non-numeric ids are treated as missing."""
    pid = safe_int(product_id)
    product = product_service.get_by_id(db, pid) if pid is not None else None
    if not product:
        raise NotFoundError("Product not found")
    return product.to_dict()


# ==========================================
# POST /products
# ==========================================

@router.post("/products", status_code=201)
async def create_product(data: Dict[str, Any], db: Session = Depends(get_db)):
    try:
        product = product_service.create(db, data)
        db.commit()
    except StorefrontError:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Product create failed: {e}", exc_info=True)
        return JSONResponse(
            {"error": "Server error while creating product", "details": str(e)},
            status_code=500,
        )

    logger.info(f"Product #{product.id} created: {product.name}")
    return JSONResponse(product.to_dict(), status_code=201)


# ==========================================
# GET /categories
# ==========================================

@router.get("/categories")
async def list_categories():
    return product_service.list_categories()
