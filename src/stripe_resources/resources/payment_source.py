"""
Objects that can be attached to a customer and charged.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional, Union

from pydantic import Discriminator, Tag

from ..core.expandable import Expandable
from ..core.ids import BankAccountId, CardId
from ..core.objects import ReadOnlyMetadata, StripeObject
from .source import Source

__all__ = ["BankAccount", "Card", "PaymentSource"]


class Card(StripeObject):
    OBJECT_TAG = "card"

    id: CardId
    address_city: Optional[str] = None
    address_country: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    brand: str
    country: Optional[str] = None
    customer: Optional[Expandable[Customer]] = None
    cvc_check: Optional[str] = None
    exp_month: int
    exp_year: int
    fingerprint: Optional[str] = None
    funding: str
    last4: str
    metadata: ReadOnlyMetadata = {}
    name: Optional[str] = None


class BankAccount(StripeObject):
    OBJECT_TAG = "bank_account"

    id: BankAccountId
    account_holder_name: Optional[str] = None
    account_holder_type: Optional[str] = None
    bank_name: Optional[str] = None
    country: str
    currency: str
    customer: Optional[Expandable[Customer]] = None
    fingerprint: Optional[str] = None
    last4: str
    metadata: ReadOnlyMetadata = {}
    routing_number: Optional[str] = None
    status: str


def _payment_source_tag(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        return value.get("object")
    return getattr(value, "OBJECT_TAG", None)


PaymentSource = Annotated[
    Union[
        Annotated[Card, Tag("card")],
        Annotated[BankAccount, Tag("bank_account")],
        Annotated[Source, Tag("source")],
    ],
    Discriminator(_payment_source_tag),
]


# Imported last: refers back to this module.
from .customer import Customer  # noqa: E402
