from __future__ import annotations

from ..domain.models import OfferKind, Product
from .base import D, OfferResult, OfferRule, money, register


@register
class SecondHalfPriceOffer(OfferRule):
    """
    Buy one, get the second half price.

    Every complete pair gets round(price / 2, 2) off. The half price is
    rounded before it is multiplied by the pair count.
    """

    kind = OfferKind.SECOND_HALF_PRICE.value

    def apply(self, product: Product, count: int) -> OfferResult:
        pairs = count // 2
        if pairs <= 0:
            return OfferResult.skipped({"reason": "no_pairs", "count": count})

        per_pair = money(product.price / D("2"))
        amount = per_pair * pairs
        return OfferResult.applied(
            amount,
            {"pairs": pairs, "per_pair": str(per_pair), "count": count},
        )
