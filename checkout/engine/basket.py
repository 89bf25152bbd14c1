from __future__ import annotations

from decimal import Decimal
from typing import List, Optional, Tuple

import structlog

from checkout.calculators.delivery import calc_delivery_cost
from checkout.calculators.discount import calc_offer_discounts, count_items
from checkout.calculators.subtotal import calc_subtotal
from checkout.offer_types.base import money
from checkout.schemas.breakdown import OfferLine, PriceBreakdown

from .errors import InvalidProductCode
from .pricing_tables import PricingTables, default_pricing_tables

D = Decimal

logger = structlog.get_logger(__name__)


class Basket:
    """
    Shopping basket priced at checkout.

    Holds product codes only; every price is derived from the shared pricing
    tables each time, so total() can be called any number of times and always
    reflects the current items.

    Not thread-safe: callers sharing one basket must serialize add().
    """

    def __init__(self, tables: Optional[PricingTables] = None):
        self.tables = tables if tables is not None else default_pricing_tables()
        self._items: List[str] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Basket({', '.join(self._items)})"

    @property
    def items(self) -> Tuple[str, ...]:
        return tuple(self._items)

    def count(self, product_code: str) -> int:
        return self._items.count(product_code)

    def add(self, product_code: str) -> None:
        if product_code not in self.tables.catalog:
            logger.warning("basket_add_rejected", product_code=product_code)
            raise InvalidProductCode(product_code)

        self._items.append(product_code)
        logger.debug("basket_item_added", product_code=product_code, items=len(self._items))

    # -----------------
    # pricing
    # -----------------

    def subtotal(self) -> D:
        return calc_subtotal(self._items, self.tables.catalog)

    def discount(self) -> D:
        amount, _ = calc_offer_discounts(
            count_items(self._items), self.tables.catalog, self.tables.offers
        )
        return amount

    def discounted_subtotal(self) -> D:
        return self.subtotal() - self.discount()

    def delivery_cost(self) -> D:
        return calc_delivery_cost(self.discounted_subtotal(), self.tables.delivery_rules)

    def total(self) -> D:
        return self.breakdown().total

    def breakdown(self) -> PriceBreakdown:
        subtotal = self.subtotal()
        discount, offer_lines = calc_offer_discounts(
            count_items(self._items), self.tables.catalog, self.tables.offers
        )
        discounted = subtotal - discount
        delivery = calc_delivery_cost(discounted, self.tables.delivery_rules)
        total = money(discounted + delivery)

        logger.debug(
            "basket_priced",
            items=len(self._items),
            subtotal=str(subtotal),
            discount=str(discount),
            delivery=str(delivery),
            total=str(total),
        )

        return PriceBreakdown(
            items=list(self._items),
            subtotal=subtotal,
            discount=discount,
            discounted_subtotal=discounted,
            delivery=delivery,
            total=total,
            offers=[OfferLine(**line) for line in offer_lines],
        )
