from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class DiscountQuote(BaseModel):
    """Response model for a single discount computation."""
    price: float = Field(description="Original price")
    discount_percent: float = Field(description="Discount percentage applied (0-100)")
    discount_amount: float = Field(description="Amount subtracted from the price")
    discounted_price: float = Field(description="Price after the discount")
    coupon_code: Optional[str] = Field(default=None, description="Coupon code the percentage came from, if any")
