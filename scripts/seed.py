"""
Storefront - Catalog Seeder
=============================
Seeds a handful of shoes and clothing products through the same
ingestion path as POST /products (validation included).

Usage:
    python scripts/seed.py          # Seed (skips products that already exist by name)
    python scripts/seed.py --reset  # Drop all data and reseed
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.database import SessionLocal, Base, engine
from common.exceptions import ProductValidationError
from modules.catalog.models import Product
from modules.catalog.service import product_service


SAMPLE_PRODUCTS = [
    {
        "name": "Air Runner 2",
        "basePrice": 2499.90,
        "description": "Lightweight running shoe with a breathable mesh upper.",
        "category": "shoes",
        "brand": "Stride",
        "images": [
            "https://images.example.com/air-runner-2/main.jpg",
            "https://images.example.com/air-runner-2/side.jpg",
        ],
        "variants": [
            {"size": "40", "stock": 4},
            {"size": "41", "stock": 2},
            {"size": "42", "stock": 0},
            {"size": "43", "stock": 5},
        ],
    },
    {
        "name": "Trail Boot",
        "basePrice": 3899,
        "description": "Waterproof hiking boot with a grippy outsole.",
        "category": "shoes",
        "imageUrl": "https://images.example.com/trail-boot/main.jpg",
        "variants": [
            {"size": "42", "stock": 3},
            {"size": "44.5", "stock": 1},
        ],
    },
    {
        "name": "Everyday Tee",
        "basePrice": 349.5,
        "description": "Organic cotton crew-neck t-shirt.",
        "category": "clothing",
        "brand": "Basics",
        "imageUrl": "https://images.example.com/everyday-tee/main.jpg",
        "variants": [
            {"size": "S", "stock": 10},
            {"size": "M", "stock": 2},
            {"size": "L"},
        ],
    },
    {
        "name": "Wool Overcoat",
        "basePrice": 5200,
        "description": "Double-breasted overcoat in a wool blend.",
        "category": "clothing",
        "images": ["https://images.example.com/wool-overcoat/main.jpg"],
        "variants": [
            {"size": "M", "stock": 0},
            {"size": "XL", "stock": 0},
        ],
    },
]


def seed():
    db = SessionLocal()
    try:
        print("=" * 50)
        print("  Storefront — Catalog Seeder")
        print("=" * 50)

        Base.metadata.create_all(bind=engine)

        for data in SAMPLE_PRODUCTS:
            existing = db.query(Product).filter(Product.name == data["name"]).first()
            if existing:
                print(f"  = exists: {data['name']}")
                continue
            try:
                product = product_service.create(db, data)
            except ProductValidationError as e:
                print(f"  ! skipped {data['name']}: {e.message} ({e.details})")
                continue
            print(f"  + {product.category}: {product.name} ({len(product.variants)} sizes)")

        db.commit()
        print("\nSeed complete.")
    except Exception as e:
        db.rollback()
        print(f"\n[ERROR] Seed failed: {e}")
        raise
    finally:
        db.close()


def reset_and_seed():
    """Drop all tables and recreate + seed."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    print("All tables recreated")
    seed()


if __name__ == "__main__":
    if "--reset" in sys.argv:
        confirm = input("This will DELETE ALL DATA. Type 'yes' to confirm: ")
        if confirm.strip().lower() == "yes":
            reset_and_seed()
        else:
            print("Aborted.")
    else:
        seed()
