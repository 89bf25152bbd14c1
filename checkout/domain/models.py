from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

D = Decimal


class OfferKind(str, Enum):
    SECOND_HALF_PRICE = "second_half_price"


@dataclass(frozen=True)
class Product:
    code: str
    name: str
    price: D


@dataclass(frozen=True)
class DeliveryRule:
    threshold: D
    cost: D


@dataclass(frozen=True)
class Offer:
    product_code: str
    kind: OfferKind
    min_quantity: int = 2
