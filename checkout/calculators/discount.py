from __future__ import annotations

from collections import Counter
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from ..domain.models import Offer, Product
from ..offer_types.base import OfferResult, offer_registry

D = Decimal


def calc_offer_discounts(
    counts: Mapping[str, int],
    catalog: Mapping[str, Product],
    offers: Mapping[str, Offer],
) -> Tuple[D, List[Dict[str, Any]]]:
    """
    Sum the discounts of all offers, keyed by product code.

    Offers below their min_quantity are skipped. Everything else is
    dispatched to the strategy registered for the offer kind; the loop
    itself never looks at the kind.

    Returns (total discount, one explain entry per offer).
    """
    total = D("0.00")
    lines: List[Dict[str, Any]] = []

    for code, offer in offers.items():
        count = counts.get(code, 0)
        if count < offer.min_quantity:
            result = OfferResult.skipped(
                {"reason": "below_min_quantity", "count": count, "min_quantity": offer.min_quantity}
            )
        else:
            rule_cls = offer_registry[offer.kind.value]
            result = rule_cls(offer).apply(catalog[code], count)

        total += result.amount
        lines.append(
            {
                "product_code": code,
                "kind": offer.kind.value,
                "decision": result.decision,
                "amount": result.amount,
                "meta": dict(result.meta),
            }
        )

    return total, lines


def count_items(items: Iterable[str]) -> Counter:
    return Counter(items)
