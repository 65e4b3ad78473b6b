from __future__ import annotations

import math
from typing import Optional

import pandas as pd

from pricing.coupons import COUPON_TABLE, get_coupon_percent
from pricing.errors import InvalidInputError, UnknownCouponError
from pricing.interface import PricingService
from pricing.logger import get_logger
from pricing.models import CouponList, CouponResponse, DiscountQuote

NEGATIVE_PRICE_MESSAGE = "Price cannot be negative"
DISCOUNT_RANGE_MESSAGE = "Discount must be between 0 and 100"


def _as_number(value, field: str) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        raise InvalidInputError(f"{field} must be a number, got {value!r}", field=field)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{field} must be a number, got {value!r}", field=field) from None
    if not math.isfinite(number):
        raise InvalidInputError(f"{field} must be a finite number, got {value!r}", field=field)
    return number


class PricingCalculator(PricingService):
    """
    Discount calculator backed by a fixed coupon table.
    - Both operations validate fail-fast: price first, then percentage or coupon.
    - No state beyond the read-only table, so one instance can be shared across threads.
    """

    def __init__(self) -> None:
        self.logger = get_logger(__name__)

    # ---- validation ----

    def _check_price(self, price) -> float:
        price = _as_number(price, "price")
        if price < 0:
            self.logger.warning(f"Rejected negative price: {price}")
            raise InvalidInputError(NEGATIVE_PRICE_MESSAGE, field="price")
        return price

    def _check_percent(self, discount_percent) -> float:
        discount_percent = _as_number(discount_percent, "discount_percent")
        if discount_percent < 0 or discount_percent > 100:
            self.logger.warning(f"Rejected out-of-range discount: {discount_percent}")
            raise InvalidInputError(DISCOUNT_RANGE_MESSAGE, field="discount_percent")
        return discount_percent

    def _lookup(self, coupon_code: str) -> float:
        try:
            return get_coupon_percent(coupon_code)
        except UnknownCouponError:
            self.logger.warning(f"Rejected unknown coupon code: {coupon_code!r}")
            raise

    # ---- core operations ----

    def calculate(self, price: float, discount_percent: float) -> float:
        """Calculate the price after a percentage discount.

        Args:
            price: Original price, must be >= 0.
            discount_percent: Discount in the range [0, 100].
        Returns:
            float: ``price - price * (discount_percent / 100)``.
        Raises:
            InvalidInputError: If the price is negative or the discount is out of range.
        """
        price = self._check_price(price)
        discount_percent = self._check_percent(discount_percent)
        discounted = price - price * (discount_percent / 100)
        self.logger.debug(f"calculate({price}, {discount_percent}) -> {discounted}")
        return discounted

    def apply_coupon(self, price: float, coupon_code: str) -> float:
        """Apply a coupon code to a price.

        Args:
            price: Original price, must be >= 0.
            coupon_code: Case-sensitive code from the coupon table.
        Returns:
            float: The discounted price.
        Raises:
            InvalidInputError: If the price is negative.
            UnknownCouponError: If the code is not in the coupon table.
        """
        price = self._check_price(price)
        percent = self._lookup(coupon_code)
        return self.calculate(price, percent)

    # ---- quotes & listings ----

    def quote(self, price: float, discount_percent: float, coupon_code: Optional[str] = None) -> DiscountQuote:
        """Return a DiscountQuote for a percentage discount."""
        discounted = self.calculate(price, discount_percent)
        price = float(price)
        return DiscountQuote(
            price=price,
            discount_percent=float(discount_percent),
            discount_amount=price - discounted,
            discounted_price=discounted,
            coupon_code=coupon_code,
        )

    def quote_coupon(self, price: float, coupon_code: str) -> DiscountQuote:
        """Return a DiscountQuote for a coupon code."""
        self._check_price(price)
        return self.quote(price, self._lookup(coupon_code), coupon_code=coupon_code)

    def list_coupons(self) -> CouponList:
        rows = [
            CouponResponse(coupon_code=code, discount_pct=pct)
            for code, pct in sorted(COUPON_TABLE.items(), key=lambda item: (item[1], item[0]))
        ]
        return CouponList(values=rows)

    def coupon_price_table(self, price: float) -> pd.DataFrame:
        """Price ``price`` under every coupon.

        Returns:
            pd.DataFrame: columns ``coupon_code``, ``discount_pct``, ``discounted_price``,
            one row per coupon, ordered by ``discount_pct`` ascending.
        """
        price = self._check_price(price)
        df = pd.DataFrame(
            [c.model_dump() for c in self.list_coupons().values],
            columns=["coupon_code", "discount_pct"],
        )
        df["discounted_price"] = [self.apply_coupon(price, code) for code in df["coupon_code"]]
        return df.reset_index(drop=True)
