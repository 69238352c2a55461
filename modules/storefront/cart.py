"""
Storefront Module - Cart Engine
=================================
Session-local shopping cart: add / remove / change quantity / totals.

Invariants:
  - at most one line per product + size
  - 1 <= quantity <= live stock of the line's variant, checked on every mutation
  - rejected mutations leave the cart untouched and report why

Lines are frozen dataclasses; every mutation swaps in new values.
"""

import logging
import time
from dataclasses import replace
from decimal import Decimal
from typing import Callable, Iterable, Iterator, Optional, Tuple

from modules.storefront.models import CartLine, CartResult, Product, Variant

logger = logging.getLogger("storefront.cart")

MSG_SELECT_SIZE = "Please select a size first!"
MSG_SIZE_UNAVAILABLE = "Selected size not available"
MSG_ADDED = "Product added to cart!"
MSG_INSUFFICIENT_STOCK = "Insufficient stock! (Available: {stock})"
MSG_MAX_STOCK = "Maximum stock limit reached! ({stock})"
MSG_PRODUCT_GONE = "Product is no longer available"


def _millis() -> int:
    return int(time.time() * 1000)


class CartEngine:
    """
    One cart per browser session. Pass it explicitly to whatever handles
    the shopper's actions; it never talks to the server.

    strict_unresolved: when a line's variant can no longer be found in the
    catalog passed to update_quantity, False lets the update through
    without a ceiling check, True rejects it.
    """

    def __init__(self, strict_unresolved: bool = False, clock: Callable[[], int] = _millis):
        self.strict_unresolved = strict_unresolved
        self._clock = clock
        self._last_stamp = 0
        self._lines: Tuple[CartLine, ...] = ()

    # ==========================================
    # Read access
    # ==========================================

    @property
    def lines(self) -> Tuple[CartLine, ...]:
        return self._lines

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self._lines)

    def find_line(self, cart_id: str) -> Optional[CartLine]:
        for line in self._lines:
            if line.cart_id == cart_id:
                return line
        return None

    def get_total_item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def get_total_price(self) -> Decimal:
        return sum((line.line_total for line in self._lines), Decimal("0"))

    # ==========================================
    # Mutations
    # ==========================================

    def add_to_cart(self, product: Product, selected_size: str) -> CartResult:
        if not selected_size:
            return CartResult(False, MSG_SELECT_SIZE)

        variant = product.find_variant(selected_size)
        if variant is None:
            return CartResult(False, MSG_SIZE_UNAVAILABLE)

        existing = self._line_for(product.id, selected_size)
        current_qty = existing.quantity if existing else 0
        if current_qty + 1 > variant.stock:
            return CartResult(False, MSG_INSUFFICIENT_STOCK.format(stock=variant.stock))

        if existing:
            self._swap(existing, replace(existing, quantity=existing.quantity + 1))
        else:
            self._lines = self._lines + (self._new_line(product, variant),)

        logger.debug(f"Added {product.name} [{selected_size}] → qty {current_qty + 1}")
        return CartResult(True, MSG_ADDED)

    def remove_from_cart(self, cart_id: str) -> None:
        self._lines = tuple(line for line in self._lines if line.cart_id != cart_id)

    def update_quantity(self, cart_id: str, delta: int, products: Iterable[Product]) -> CartResult:
        line = self.find_line(cart_id)
        if line is None:
            return CartResult(True)

        new_qty = line.quantity + delta
        if new_qty < 1:
            # Quantity floor: removal is an explicit action
            return CartResult(True)

        variant = self._resolve_variant(line.variant_id, products)
        if variant is not None:
            if new_qty > variant.stock:
                return CartResult(False, MSG_MAX_STOCK.format(stock=variant.stock))
        elif self.strict_unresolved:
            return CartResult(False, MSG_PRODUCT_GONE)
        else:
            logger.warning(
                f"Variant #{line.variant_id} not in catalog snapshot; "
                f"updating {line.cart_id} without a stock check"
            )

        self._swap(line, replace(line, quantity=new_qty))
        return CartResult(True)

    def clear(self) -> None:
        self._lines = ()

    # ==========================================
    # Private helpers
    # ==========================================

    def _line_for(self, product_id: int, size: str) -> Optional[CartLine]:
        for line in self._lines:
            if line.product_id == product_id and line.size == size:
                return line
        return None

    def _swap(self, old: CartLine, new: CartLine) -> None:
        self._lines = tuple(new if line is old else line for line in self._lines)

    def _next_stamp(self) -> int:
        # Strictly increasing, so two lines created in the same millisecond differ
        stamp = max(self._clock(), self._last_stamp + 1)
        self._last_stamp = stamp
        return stamp

    def _new_line(self, product: Product, variant: Variant) -> CartLine:
        return CartLine(
            cart_id=f"{product.id}-{variant.size}-{self._next_stamp()}",
            product_id=product.id,
            product_name=product.name,
            price=product.base_price,
            image_url=product.main_image,
            size=variant.size,
            quantity=1,
            variant_id=variant.id,
            max_stock=variant.stock,
        )

    @staticmethod
    def _resolve_variant(variant_id: int, products: Iterable[Product]) -> Optional[Variant]:
        for product in products:
            for v in product.variants:
                if v.id == variant_id:
                    return v
        return None
