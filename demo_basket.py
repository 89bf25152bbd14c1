#!/usr/bin/env python3
"""
Demo script for the Basket pricing engine.

Without arguments it prices the reference scenarios and reports pass/fail.
With product codes it prices that one basket:

    python demo_basket.py B01 G01
"""

import argparse
import sys
from decimal import Decimal
from typing import List, Optional, Sequence

from checkout.core.logging_config import setup_logging
from checkout.engine.basket import Basket
from checkout.engine.errors import InvalidProductCode
from checkout.engine.pricing_tables import PricingTables, default_pricing_tables, load_pricing_tables

D = Decimal

SCENARIOS = [
    {"items": ["B01", "G01"], "expected": D("37.85")},  # Blue + Green
    {"items": ["R01", "R01"], "expected": D("54.37")},  # Two Reds with discount
    {"items": ["R01", "G01"], "expected": D("60.85")},  # Red + Green
    {"items": ["B01", "B01", "R01", "R01"], "expected": D("68.27")},  # Two Blues + Two Reds
    {"items": [], "expected": D("4.95")},  # Empty basket still pays base delivery
]


def build_basket(codes: Sequence[str], tables: Optional[PricingTables] = None) -> Basket:
    basket = Basket(tables)
    for code in codes:
        basket.add(code)
    return basket


def run_scenarios(tables: Optional[PricingTables] = None) -> List[dict]:
    results = []
    for scenario in SCENARIOS:
        total = build_basket(scenario["items"], tables).total()
        results.append(
            {
                "items": scenario["items"],
                "total": total,
                "expected": scenario["expected"],
                "passed": total == scenario["expected"],
            }
        )
    return results


def format_scenarios(results: List[dict]) -> str:
    out = []
    for i, r in enumerate(results, 1):
        out.append(f"Test case {i}: Items: {', '.join(r['items']) or 'none'}")
        out.append(f"Total: ${r['total']:.2f}")
        out.append(f"Expected: ${r['expected']:.2f}")
        out.append(f"Pass: {r['passed']}")
        out.append("")
    return "\n".join(out)


def format_breakdown(basket: Basket) -> str:
    b = basket.breakdown()
    out = [f"Items: {', '.join(b.items) if b.items else 'none'}"]
    out.append(f"  Subtotal: ${b.subtotal:.2f}")
    for line in b.offers:
        if line.decision == "APPLIED":
            out.append(f"  Offer {line.kind} ({line.product_code}): -${line.amount:.2f}")
    out.append(f"  Discount: ${b.discount:.2f}")
    out.append(f"  Delivery: ${b.delivery:.2f}")
    out.append(f"Custom basket total: ${b.total:.2f}")
    return "\n".join(out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Price a shopping basket.")
    parser.add_argument("codes", nargs="*", help="product codes, e.g. R01 G01 B01")
    parser.add_argument("--tables", help="alternative pricing tables YAML file")
    args = parser.parse_args(argv)

    tables = load_pricing_tables(args.tables) if args.tables else default_pricing_tables()

    if not args.codes:
        results = run_scenarios(tables)
        print(format_scenarios(results))
        return 0 if all(r["passed"] for r in results) else 1

    try:
        basket = build_basket(args.codes, tables)
    except InvalidProductCode as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(format_breakdown(basket))
    return 0


def cli() -> None:
    # stdout carries the pricing report, logs go to stderr
    setup_logging(stream=sys.stderr)
    sys.exit(main())


if __name__ == "__main__":
    cli()
