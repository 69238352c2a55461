"""
Storefront - Live Smoke Scenarios
===================================
Runs the main flows against a running server (seeded or empty):
catalog reads, product ingestion rules, and a cart session on top
of the fetched catalog.

Usage:
    uvicorn main:app --port 3000 &
    python scripts/test_scenarios.py [base_url]
"""
import os
import sys

import httpx

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from common.helpers import format_price
from modules.storefront import CartEngine, CatalogCache, StorefrontAPIClient

BASE = sys.argv[1] if len(sys.argv) > 1 else "http://127.0.0.1:3000"
results = []


def report(test_id, desc, passed, note=""):
    status = "PASS" if passed else "FAIL"
    results.append((test_id, desc, status, note))
    icon = "✅" if passed else "❌"
    print(f"  {icon} {test_id}: {desc} {'- ' + note if note else ''}")


def section(title):
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


# ============================================================
section("TS-01: Catalog reads")

r = httpx.get(f"{BASE}/health")
report("TS-01-01", "Health check", r.status_code == 200)

r = httpx.get(f"{BASE}/categories")
report("TS-01-02", "Categories are shoes + clothing", r.json() == ["shoes", "clothing"])

r = httpx.get(f"{BASE}/products")
products = r.json()
report("TS-01-03", "Product list loads", r.status_code == 200, f"{len(products)} products")

dates = [p["createdAt"] for p in products]
report("TS-01-04", "Newest first", dates == sorted(dates, reverse=True))

r = httpx.get(f"{BASE}/products", params={"category": "shoes"})
report("TS-01-05", "Category filter", all(p["category"] == "shoes" for p in r.json()))

r = httpx.get(f"{BASE}/products/abc")
report("TS-01-06", "Non-numeric id → 404", r.status_code == 404)

r = httpx.get(f"{BASE}/products/99999999")
report("TS-01-07", "Missing id → 404", r.status_code == 404, str(r.json()))


# ============================================================
section("TS-02: Product ingestion")

payload = {
    "name": "Smoke Tee", "basePrice": 100, "description": "smoke test item",
    "category": "clothing", "imageUrl": "https://images.example.com/smoke.jpg",
    "variants": [{"size": "M", "stock": 2}],
}
bad = dict(payload, variants=[{"size": "XXL", "stock": 1}])
r = httpx.post(f"{BASE}/products", json=bad)
report("TS-02-01", "XXL rejected", r.status_code == 400 and "XS, S, M, L, XL" in r.json().get("details", ""))

r = httpx.post(f"{BASE}/products", json=dict(payload, basePrice=0))
report("TS-02-02", "Zero price rejected", r.status_code == 400, r.json().get("error", ""))

r = httpx.post(f"{BASE}/products", json=payload)
report("TS-02-03", "Valid product created", r.status_code == 201)
created = r.json()


# ============================================================
section("TS-03: Cart session")

with StorefrontAPIClient(base_url=BASE) as client:
    cache = CatalogCache(client)
    cache.select_category("clothing")
    report("TS-03-01", "Cache loaded", cache.error is None and not cache.loading)

    product = cache.find_product(created.get("id"))
    cart = CartEngine()
    if product:
        r1 = cart.add_to_cart(product, "M")
        r2 = cart.add_to_cart(product, "M")
        r3 = cart.add_to_cart(product, "M")
        report("TS-03-02", "Two adds succeed", r1.success and r2.success)
        report("TS-03-03", "Third add hits stock", not r3.success, r3.message)
        line = cart.lines[0]
        up = cart.update_quantity(line.cart_id, 1, cache.products)
        report("TS-03-04", "Update above stock rejected", not up.success, up.message)
        report("TS-03-05", "Total items = 2", cart.get_total_item_count() == 2, format_price(cart.get_total_price()))
    else:
        report("TS-03-02", "Created product visible in cache", False)


# ============================================================
# Summary
# ============================================================
section("SUMMARY")

passed = sum(1 for r in results if r[2] == "PASS")
failed = sum(1 for r in results if r[2] == "FAIL")
total = len(results)

print(f"\n  Total: {total}  |  PASS: {passed}  |  FAIL: {failed}")
print()

if failed:
    print("  FAILED TESTS:")
    for tid, desc, status, note in results:
        if status == "FAIL":
            print(f"    {tid}: {desc} {note}")

sys.exit(0 if failed == 0 else 1)
