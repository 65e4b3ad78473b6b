#!/usr/bin/env python3
"""
Command-line front end for the discount calculator.

Examples:
  python -m pricing calculate 100 10
  python -m pricing coupon 400 BLACKFRIDAY
  python -m pricing coupons

Exit codes: 0 on success, 2 when the input is rejected.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from pricing.config import get_config
from pricing.errors import PricingError
from pricing.logger import configure_logging
from pricing.util import get_pricing_service


def _fmt(value: float, decimals: int) -> str:
    return f"{value:.{decimals}f}"


def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()
    configure_logging()
    decimals = config.display_decimals

    parser = argparse.ArgumentParser(description="Compute discounted prices from a percentage or a coupon code.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_calc = sub.add_parser("calculate", help="Apply a percentage discount.")
    p_calc.add_argument("price", type=str)
    p_calc.add_argument("percent", type=str, help="Discount percentage, 0-100.")

    p_coupon = sub.add_parser("coupon", help="Apply a coupon code (case-sensitive).")
    p_coupon.add_argument("price", type=str)
    p_coupon.add_argument("code", type=str)

    sub.add_parser("coupons", help="List known coupon codes.")

    args = parser.parse_args(argv)
    service = get_pricing_service()

    try:
        if args.command == "calculate":
            result = service.calculate(args.price, args.percent)
        elif args.command == "coupon":
            result = service.apply_coupon(args.price, args.code)
        else:
            for coupon in service.list_coupons().values:
                print(f"{coupon.coupon_code}\t{_fmt(coupon.discount_pct, 0)}%")
            return 0
    except PricingError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(_fmt(result, decimals))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
