from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Optional, Type

from ..domain.models import Offer, Product

D = Decimal

# Decisions (avoid string typos)
DECISION_APPLIED = "APPLIED"
DECISION_SKIPPED = "SKIPPED"


def money(x: D) -> D:
    return x.quantize(D("0.01"), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class OfferResult:
    """
    Result of applying an offer to one product line.
    - decision: APPLIED / SKIPPED
    - amount: discount, never negative
    - meta: explainability payload for the breakdown
    """

    decision: str
    amount: D
    meta: Dict[str, Any]

    @staticmethod
    def applied(amount: D, meta: Optional[Dict[str, Any]] = None) -> "OfferResult":
        return OfferResult(decision=DECISION_APPLIED, amount=amount, meta=meta or {})

    @staticmethod
    def skipped(meta: Optional[Dict[str, Any]] = None) -> "OfferResult":
        return OfferResult(decision=DECISION_SKIPPED, amount=D("0.00"), meta=meta or {})


class OfferRule:
    """
    Base class for all offer kinds. Every offer must implement apply(product, count).

    product: the catalog entry the offer is keyed on
    count: number of units of that product in the basket (already >= min_quantity)
    """

    kind: str = "base"

    def __init__(self, offer: Offer):
        self.offer = offer

    def apply(self, product: Product, count: int) -> OfferResult:
        raise NotImplementedError


# Registry: offer kind -> OfferRule class
offer_registry: Dict[str, Type[OfferRule]] = {}


def register(offer_cls: Type[OfferRule]) -> Type[OfferRule]:
    """
    Decorator to register an offer strategy by its kind.
    Fails fast on duplicate registrations.
    """
    key = getattr(offer_cls, "kind", None)
    if not key or key == OfferRule.kind:
        raise ValueError(f"Offer class {offer_cls.__name__} has no kind")

    if key in offer_registry and offer_registry[key] is not offer_cls:
        raise ValueError(
            f"Duplicate offer registration for kind '{key}': "
            f"{offer_registry[key].__name__} vs {offer_cls.__name__}"
        )

    offer_registry[key] = offer_cls
    return offer_cls
