"""Root conftest — shared test configuration."""

import os

# Never touch a developer database from the test suite
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config.database import Base, get_db
from main import app
from modules.storefront.models import Image, Product, Variant


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def test_client(db_session):
    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def product_payload():
    return {
        "name": "Everyday Tee",
        "basePrice": 100,
        "description": "Organic cotton crew-neck t-shirt.",
        "category": "clothing",
        "imageUrl": "https://img.test/tee.jpg",
        "variants": [{"size": "M", "stock": 2}, {"size": "L", "stock": 5}],
    }


def _make_product(
    product_id=1, name="Everyday Tee", price="100", sizes=(("M", 2),),
    variant_id_start=None, category="clothing", image_url="https://img.test/p.jpg",
):
    """Client-side Product snapshot with variants numbered product_id*10 + n."""
    start = variant_id_start if variant_id_start is not None else product_id * 10
    variants = tuple(
        Variant(id=start + i, product_id=product_id, size=size, stock=stock)
        for i, (size, stock) in enumerate(sizes)
    )
    return Product(
        id=product_id,
        name=name,
        base_price=Decimal(price),
        category=category,
        image_url=image_url,
        variants=variants,
        images=(Image(id=product_id, product_id=product_id, url=image_url),),
    )


@pytest.fixture
def make_product():
    return _make_product
