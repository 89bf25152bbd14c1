from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from ..domain.models import DeliveryRule

D = Decimal


def calc_delivery_cost(discounted_subtotal: D, rules: Sequence[DeliveryRule]) -> D:
    """
    rules are sorted by descending threshold; the first rule whose
    threshold <= discounted_subtotal wins.

      90.00 -> 0.00
      50.00 -> 2.95
       0.00 -> 4.95
    """
    for rule in rules:
        if discounted_subtotal >= rule.threshold:
            return rule.cost

    # only reachable for a negative discounted subtotal; the table always
    # has a 0.00 catch-all
    return rules[-1].cost
