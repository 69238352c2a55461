"""Product ingestion rules — order and messages of ProductValidator."""

from decimal import Decimal

import pytest

from common.exceptions import ProductValidationError
from modules.catalog.validators import ProductValidator, normalize_price, resolve_main_image


def _payload(**overrides):
    data = {
        "name": "Trail Boot",
        "basePrice": "249.90",
        "description": "Waterproof hiking boot",
        "category": "shoes",
        "imageUrl": "https://img.test/boot.jpg",
        "variants": [{"size": "42", "stock": 3}],
    }
    data.update(overrides)
    return data


def _error(data):
    with pytest.raises(ProductValidationError) as exc:
        ProductValidator.validate_product_input(data)
    return exc.value


def test_valid_payload_passes():
    ProductValidator.validate_product_input(_payload())


@pytest.mark.parametrize("field", ["name", "basePrice", "description", "category"])
def test_required_fields(field):
    data = _payload()
    del data[field]
    assert _error(data).message == "Missing required fields"


def test_image_required_from_either_source():
    assert _error(_payload(imageUrl=None)).message == "Missing required fields"
    assert _error(_payload(imageUrl="", images=[])).message == "Missing required fields"
    ProductValidator.validate_product_input(_payload(imageUrl=None, images=["https://img.test/x.jpg"]))


def test_resolve_main_image_prefers_explicit():
    assert resolve_main_image({"imageUrl": "a", "images": ["b"]}) == "a"
    assert resolve_main_image({"images": ["b", "c"]}) == "b"
    assert resolve_main_image({}) is None


def test_invalid_category_lists_allowed():
    err = _error(_payload(category="hats"))
    assert err.message == "Invalid category"
    assert err.details == "Category must be one of: shoes, clothing"


@pytest.mark.parametrize("price", [0, -5, "abc", "NaN", True])
def test_invalid_price(price):
    assert _error(_payload(basePrice=price)).message == "Invalid price"


def test_price_zero_is_not_treated_as_missing():
    # 0 is present but invalid: the price rule reports it, not the required-fields rule
    assert _error(_payload(basePrice=0)).message == "Invalid price"


@pytest.mark.parametrize("variants", [None, [], "42"])
def test_variants_required(variants):
    err = _error(_payload(variants=variants))
    assert err.message == "Invalid variants"
    assert err.details == "At least one variant (size/stock) is required"


@pytest.mark.parametrize("size", ["forty", "", None])
def test_shoe_size_must_be_numeric(size):
    err = _error(_payload(variants=[{"size": size}]))
    assert err.message == "Invalid shoe size"


def test_clothing_size_must_be_in_set():
    err = _error(_payload(category="clothing", variants=[{"size": "M"}, {"size": "XXL"}]))
    assert err.message == "Invalid clothing size"
    assert err.details == "Clothing sizes must be one of: XS, S, M, L, XL. Invalid: XXL"


@pytest.mark.parametrize("stock", [-1, "3", 2.5, False])
def test_invalid_stock(stock):
    err = _error(_payload(variants=[{"size": "42", "stock": stock}]))
    assert err.message == "Invalid stock quantity"
    assert "42" in err.details


def test_zero_stock_allowed():
    ProductValidator.validate_product_input(_payload(variants=[{"size": "42", "stock": 0}]))


def test_rules_checked_in_order():
    # Bad category and bad price: category rule fires first
    assert _error(_payload(category="hats", basePrice=-1)).message == "Invalid category"
    # Bad price and no variants: price rule fires first
    assert _error(_payload(basePrice=-1, variants=[])).message == "Invalid price"


@pytest.mark.parametrize("price", ["0.001", 0.004, "-0.001", "100000000", "99999999.995", "1e30"])
def test_price_must_survive_rounding_to_cents(price):
    assert _error(_payload(basePrice=price)).message == "Invalid price"


@pytest.mark.parametrize("price, stored", [
    ("0.005", Decimal("0.01")),
    (19.999, Decimal("20.00")),
    ("99999999.99", Decimal("99999999.99")),
])
def test_normalize_price_bounds(price, stored):
    ProductValidator.validate_product_input(_payload(basePrice=price))
    assert normalize_price(price) == stored


@pytest.mark.parametrize("images", ["https://img.test/x.jpg", {"url": "a"}, ["ok", ""], ["ok", 3]])
def test_images_must_be_list_of_urls(images):
    err = _error(_payload(images=images))
    assert err.message == "Invalid images"


@pytest.mark.parametrize("field, value", [
    ("name", 42), ("name", ["Boot"]), ("description", {"text": "x"}),
    ("imageUrl", {"u": 1}),
])
def test_text_fields_must_be_strings(field, value):
    assert _error(_payload(**{field: value})).message == "Missing required fields"


def test_non_string_first_image_is_not_a_main_image():
    assert resolve_main_image({"images": [{"u": 1}]}) is None
    assert resolve_main_image({"imageUrl": 7, "images": ["b"]}) == "b"
    assert _error(_payload(imageUrl=None, images=[{"u": 1}])).message == "Missing required fields"


def test_brand_must_be_string():
    assert _error(_payload(brand={"name": "Stride"})).message == "Invalid brand"
    ProductValidator.validate_product_input(_payload(brand=""))
