"""
Value types embedded in several resources.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.objects import StripeModel
from ..core.params import Params

__all__ = [
    "Address",
    "AddressParams",
    "CardParams",
    "ShippingDetails",
    "ShippingParams",
]


class Address(StripeModel):
    city: Optional[str] = None
    country: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None


class ShippingDetails(StripeModel):
    address: Address
    name: str
    carrier: Optional[str] = None
    phone: Optional[str] = None
    tracking_number: Optional[str] = None


class AddressParams(Params):
    city: Optional[str] = None
    country: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None


class ShippingParams(Params):
    address: AddressParams
    name: str
    phone: Optional[str] = None


class CardParams(Params):
    """
    Raw card details sent in place of a token, e.g. as a customer's ``source``.

    The API tells the two apart by the ``object`` key, which is always sent.
    """

    number: str
    exp_month: int
    exp_year: int
    address_city: Optional[str] = None
    address_country: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    currency: Optional[str] = None
    cvc: Optional[str] = None
    name: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return {"object": "card", **super().to_payload()}
