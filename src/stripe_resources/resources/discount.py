"""
Coupons and the discounts that apply them to customers or subscriptions.
"""

from __future__ import annotations

from typing import Literal, Optional

from ..core.ids import CouponId
from ..core.objects import ReadOnlyMetadata, StripeModel, StripeObject
from ..core.params import Timestamp

__all__ = ["Coupon", "Discount"]


class Coupon(StripeObject):
    """
    A discount template.

    Exactly one of ``amount_off`` (with ``currency``) or ``percent_off`` is set.
    """

    OBJECT_TAG = "coupon"

    id: CouponId
    amount_off: Optional[int] = None
    created: Timestamp
    currency: Optional[str] = None
    duration: Literal["forever", "once", "repeating"]
    duration_in_months: Optional[int] = None
    livemode: bool
    max_redemptions: Optional[int] = None
    metadata: ReadOnlyMetadata = {}
    name: Optional[str] = None
    percent_off: Optional[float] = None
    redeem_by: Optional[Timestamp] = None
    times_redeemed: int = 0
    valid: bool = True


class Discount(StripeModel):
    """A coupon applied to a customer or subscription."""

    object: Literal["discount"] = "discount"
    coupon: Coupon
    customer: Optional[str] = None
    end: Optional[Timestamp] = None
    start: Timestamp
    subscription: Optional[str] = None
