from __future__ import annotations

import pytest
import yaml

import checkout.offer_types  # noqa: F401 (register all offers)

from checkout.engine.basket import Basket
from checkout.engine.pricing_tables import PricingTables, default_pricing_tables


@pytest.fixture
def tables() -> PricingTables:
    return default_pricing_tables()


@pytest.fixture
def basket(tables) -> Basket:
    return Basket(tables)


@pytest.fixture
def make_basket(tables):
    def _make(*codes: str) -> Basket:
        b = Basket(tables)
        for code in codes:
            b.add(code)
        return b

    return _make


@pytest.fixture
def tables_dict():
    # Same content as the packaged v1 tables; tests mutate their own copy
    return {
        "tablesVersion": "test",
        "catalog": [
            {"code": "R01", "name": "Red Widget", "price": "32.95"},
            {"code": "G01", "name": "Green Widget", "price": "24.95"},
            {"code": "B01", "name": "Blue Widget", "price": "7.95"},
        ],
        "deliveryRules": [
            {"threshold": "90.00", "cost": "0.00"},
            {"threshold": "50.00", "cost": "2.95"},
            {"threshold": "0.00", "cost": "4.95"},
        ],
        "offers": [
            {"productCode": "R01", "kind": "second_half_price", "minQuantity": 2},
        ],
    }


@pytest.fixture
def write_tables(tmp_path):
    def _write(d, name: str = "tables.yaml") -> str:
        p = tmp_path / name
        p.write_text(yaml.safe_dump(d, sort_keys=False), encoding="utf-8")
        return str(p)

    return _write
