"""
Issuing authorization details.
"""

from __future__ import annotations

from typing import Optional

from ..core.objects import StripeModel

__all__ = ["MerchantData"]


class MerchantData(StripeModel):
    """
    The seller side of an Issuing authorization.

    ``category`` is the merchant category as a snake_case string, for
    example ``"bakeries"`` or ``"airlines_air_carriers"``.
    """

    network_id: str
    category: str
    name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
