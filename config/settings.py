"""
Storefront - Centralized Configuration
========================================
All environment variables and constants are loaded here.
No other module should call os.getenv() directly.
"""

import os
from decimal import Decimal

from dotenv import load_dotenv

load_dotenv()


# ==========================================
# 🗄️ Database
# ==========================================
DB_USER = os.getenv("DB_USER")
DB_PASSWORD = os.getenv("DB_PASSWORD")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_NAME = os.getenv("DB_NAME")

if os.getenv("DATABASE_URL"):
    DATABASE_URL = os.getenv("DATABASE_URL")
elif all([DB_USER, DB_PASSWORD, DB_HOST, DB_NAME]):
    DATABASE_URL = f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
else:
    # Local development fallback
    DATABASE_URL = "sqlite:///./storefront.db"


# ==========================================
# 🌐 HTTP API
# ==========================================
ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()]

# Client side (catalog cache / API client)
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000")
API_TIMEOUT = float(os.getenv("API_TIMEOUT") or "10")


# ==========================================
# 🔧 App
# ==========================================
APP_VERSION = "1.0.0"
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# ==========================================
# 👟 Catalog Rules
# ==========================================
CATEGORIES = ("shoes", "clothing")
CLOTHING_SIZES = ("XS", "S", "M", "L", "XL")
DEFAULT_BRAND = "General"
DEFAULT_VARIANT_STOCK = 1

# base_price column is Numeric(10, 2)
PRICE_QUANTUM = Decimal("0.01")
MAX_BASE_PRICE = Decimal("99999999.99")

# Client-side sort keys for the product grid
SORT_OPTIONS = {
    "": "Default",
    "price-asc": "Price: Low to High",
    "price-desc": "Price: High to Low",
    "date-desc": "Newest Arrivals",
    "date-asc": "Oldest",
}
