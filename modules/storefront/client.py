"""
Storefront Module - REST API Client
=====================================
Thin httpx wrapper over the catalog API. No retries: a failed call
raises StorefrontAPIError and the caller decides what to show.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from config.settings import API_BASE_URL, API_TIMEOUT
from modules.storefront.models import Product

logger = logging.getLogger("storefront.client")


class StorefrontAPIError(Exception):
    """Network failure or non-2xx response from the catalog API."""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        self.message = message
        self.status_code = status_code
        self.payload = payload
        super().__init__(message)


class StorefrontAPIClient:

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = API_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._http = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self):
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    # ==========================================
    # Endpoints
    # ==========================================

    def get_products(self, category: Optional[str] = None) -> List[Product]:
        params = {"category": category} if category else None
        data = self._request("GET", "/products", params=params)
        return [Product.from_dict(p) for p in data]

    def get_product(self, product_id: int) -> Product:
        return Product.from_dict(self._request("GET", f"/products/{product_id}"))

    def create_product(self, payload: Dict[str, Any]) -> Product:
        return Product.from_dict(self._request("POST", "/products", json=payload))

    def get_categories(self) -> List[str]:
        return list(self._request("GET", "/categories"))

    # ==========================================
    # Private helpers
    # ==========================================

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            resp = self._http.request(method, path, **kwargs)
        except httpx.TimeoutException:
            raise StorefrontAPIError(f"{method} {path}: request timed out")
        except httpx.HTTPError as e:
            raise StorefrontAPIError(f"{method} {path}: {e}")

        if resp.is_error:
            try:
                payload = resp.json()
            except ValueError:
                payload = None
            message = f"HTTP error! status: {resp.status_code}"
            if isinstance(payload, dict) and payload.get("error"):
                message = f"{message} ({payload['error']})"
            logger.debug(f"{method} {path} failed: {payload}")
            raise StorefrontAPIError(message, status_code=resp.status_code, payload=payload)

        return resp.json()
