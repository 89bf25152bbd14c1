# checkout/schemas/breakdown.py
from decimal import Decimal
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class OfferLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_code: str
    kind: str
    decision: str  # "APPLIED" | "SKIPPED"
    amount: Decimal
    meta: Dict[str, Any] = Field(default_factory=dict)


class PriceBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: List[str]
    subtotal: Decimal
    discount: Decimal
    discounted_subtotal: Decimal
    delivery: Decimal
    total: Decimal
    offers: List[OfferLine] = Field(default_factory=list)
