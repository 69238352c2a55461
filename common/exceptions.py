"""
Storefront - Custom Exceptions
================================
Business-level exceptions that can be caught and converted to HTTP responses.
"""

from typing import Optional


class StorefrontError(Exception):
    """Base exception for all business logic errors."""
    status_code = 400

    def __init__(self, message: str = "An unexpected error occurred", details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> dict:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ProductValidationError(StorefrontError):
    """Raised when a product payload fails one of the ingestion rules."""
    pass


class NotFoundError(StorefrontError):
    """Raised when a requested resource doesn't exist."""
    status_code = 404
