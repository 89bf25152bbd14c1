from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Mapping

from ..domain.models import Product

D = Decimal


def calc_subtotal(items: Iterable[str], catalog: Mapping[str, Product]) -> D:
    subtotal = D("0.00")
    for code in items:
        subtotal += catalog[code].price
    return subtotal
