from __future__ import annotations

import json
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

import structlog
import yaml
from jsonschema import validate

from checkout.core.settings import settings
from checkout.domain.models import DeliveryRule, Offer, OfferKind, Product
from checkout.offer_types import offer_registry

D = Decimal

logger = structlog.get_logger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_TABLES_PATH = PACKAGE_ROOT / "rules" / "pricing_tables" / "v1.yaml"
SCHEMA_PATH = PACKAGE_ROOT / "schemas" / "pricing_tables.schema.json"


def _dups(xs: List[Any]) -> List[Any]:
    seen, dups = set(), []
    for x in xs:
        if x in seen and x not in dups:
            dups.append(x)
        seen.add(x)
    return dups


@dataclass(frozen=True)
class PricingTables:
    """
    Catalog, delivery rules and offers, frozen once loaded.

    delivery_rules is sorted by descending threshold and always ends with
    the 0.00 catch-all. offers is keyed by product code.
    """

    catalog: Mapping[str, Product]
    delivery_rules: Tuple[DeliveryRule, ...]
    offers: Mapping[str, Offer]
    version: str = "v1"

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "PricingTables":
        products = [
            Product(code=str(p["code"]), name=str(p["name"]), price=D(str(p["price"])))
            for p in d.get("catalog") or []
        ]
        dup_codes = _dups([p.code for p in products])
        if dup_codes:
            raise ValueError(f"Duplicate product codes in catalog: {dup_codes}")
        catalog = {p.code: p for p in products}

        rules = [
            DeliveryRule(threshold=D(str(r["threshold"])), cost=D(str(r["cost"])))
            for r in d.get("deliveryRules") or []
        ]
        dup_thresholds = _dups([r.threshold for r in rules])
        if dup_thresholds:
            raise ValueError(
                f"Duplicate delivery thresholds: {[str(t) for t in dup_thresholds]}"
            )
        rules.sort(key=lambda r: r.threshold, reverse=True)
        if not rules or rules[-1].threshold != D("0"):
            raise ValueError("deliveryRules must contain a 0.00 catch-all threshold.")

        offers: Dict[str, Offer] = {}
        for o in d.get("offers") or []:
            code = str(o["productCode"])
            if code not in catalog:
                raise ValueError(f"Offer references unknown product code: {code}")
            if code in offers:
                raise ValueError(f"Duplicate offer for product code: {code}")

            kind_raw = str(o["kind"])
            try:
                kind = OfferKind(kind_raw)
            except ValueError:
                raise ValueError(f"Unknown offer kind: {kind_raw}") from None
            if kind.value not in offer_registry:
                raise ValueError(f"No offer strategy registered for kind: {kind.value}")

            offers[code] = Offer(
                product_code=code,
                kind=kind,
                min_quantity=int(o.get("minQuantity", 2)),
            )

        return PricingTables(
            catalog=MappingProxyType(catalog),
            delivery_rules=tuple(rules),
            offers=MappingProxyType(offers),
            version=str(d.get("tablesVersion") or "v1"),
        )


def load_pricing_tables(path: Optional[str] = None) -> PricingTables:
    """
    Load a pricing-tables YAML file, validate it against the JSON schema and
    cross-validate it. Raises on any error.
    """
    tables_path = Path(path) if path else DEFAULT_TABLES_PATH

    with tables_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        schema = json.load(f)

    validate(instance=raw, schema=schema)
    tables = PricingTables.from_dict(raw)

    logger.info(
        "pricing_tables_loaded",
        path=str(tables_path),
        version=tables.version,
        products=len(tables.catalog),
        delivery_rules=len(tables.delivery_rules),
        offers=len(tables.offers),
    )
    return tables


@lru_cache(maxsize=1)
def default_pricing_tables() -> PricingTables:
    return load_pricing_tables(settings.PRICING_TABLES_PATH)
