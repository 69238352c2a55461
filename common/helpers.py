"""
Storefront - Shared Helpers
=============================
Pure utility functions with NO database or module dependencies.
"""

import math
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Optional


def now_utc() -> datetime:
    """Returns current UTC datetime (timezone-aware)."""
    return datetime.now(timezone.utc)


def safe_int(value: Optional[str]) -> Optional[int]:
    """Safely convert a string to int. Returns None on failure."""
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except (ValueError, TypeError):
        return None


def safe_decimal(value, default: Optional[Decimal] = None) -> Optional[Decimal]:
    """Safely convert a value to a finite Decimal. Returns default on failure."""
    if value is None or isinstance(value, bool):
        return default
    try:
        d = Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        return default
    if not d.is_finite():
        return default
    return d


def is_numeric(value) -> bool:
    """True if value reads as a finite number ("42", "42.5", 9)."""
    if isinstance(value, bool) or value is None:
        return False
    try:
        return math.isfinite(float(str(value).strip()))
    except (ValueError, TypeError):
        return False


def format_price(value) -> str:
    """Format a price with two decimals and the currency suffix."""
    if value is None:
        return "0.00 TL"
    try:
        return f"{Decimal(str(value)):.2f} TL"
    except (InvalidOperation, ValueError, TypeError):
        return str(value)


def isoformat(value: Optional[datetime]) -> Optional[str]:
    """Serialize a datetime as ISO-8601, treating naive values as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def parse_datetime(value) -> Optional[datetime]:
    """Parse an ISO-8601 string (accepts a trailing 'Z'). Returns None on failure."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    except ValueError:
        return None
