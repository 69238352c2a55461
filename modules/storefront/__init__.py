"""
Storefront Module
==================
Client side of the shop: API client, catalog cache and the session cart.
"""

from modules.storefront.cart import CartEngine
from modules.storefront.catalog_cache import CatalogCache
from modules.storefront.client import StorefrontAPIClient, StorefrontAPIError
from modules.storefront.models import CartLine, CartResult, Image, Product, Variant

__all__ = [
    "CartEngine", "CatalogCache", "StorefrontAPIClient", "StorefrontAPIError",
    "CartLine", "CartResult", "Image", "Product", "Variant",
]
