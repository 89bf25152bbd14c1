from decimal import Decimal
from itertools import combinations_with_replacement

import pytest

CODES = ("R01", "G01", "B01")
BASKETS = [c for n in range(0, 6) for c in combinations_with_replacement(CODES, n)]


@pytest.mark.parametrize("codes", BASKETS, ids=lambda c: "-".join(c) or "empty")
def test_pricing_invariants(make_basket, codes):
    b = make_basket(*codes)
    out = b.breakdown()

    # idempotent
    assert b.total() == out.total
    assert b.breakdown() == out

    # subtotal >= discount >= 0, never clamped
    assert out.subtotal >= out.discount >= Decimal("0")
    assert out.discounted_subtotal == out.subtotal - out.discount
    assert out.discounted_subtotal >= Decimal("0")

    assert out.total == (out.discounted_subtotal + out.delivery).quantize(Decimal("0.01"))
    assert out.total.as_tuple().exponent == -2


@pytest.mark.parametrize("codes", BASKETS, ids=lambda c: "-".join(c) or "empty")
def test_adding_items_never_raises_delivery_cost(make_basket, codes):
    b = make_basket(*codes)
    before = b.delivery_cost()
    b.add("G01")

    assert b.delivery_cost() <= before
