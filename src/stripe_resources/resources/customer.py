"""
The "Customer" resource.

For more details see https://stripe.com/docs/api/customers/object.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Optional, Union

from pydantic import Field

from ..core.expandable import Expandable
from ..core.ids import CouponId, CustomerId, PaymentSourceId
from ..core.objects import Deleted, ReadOnlyMetadata, StripeObject
from ..core.pagination import PaginatedList
from ..core.params import Expand, ListParams, Metadata, Params, Timestamp, TimestampFilter
from .discount import Discount
from .types import CardParams, ShippingDetails, ShippingParams

if TYPE_CHECKING:
    from ..core.client import Client

__all__ = [
    "CreateCustomer",
    "Customer",
    "ListCustomers",
    "TaxExempt",
    "UpdateCustomer",
]


class TaxExempt(str, Enum):
    EXEMPT = "exempt"
    NONE = "none"
    REVERSE = "reverse"


class Customer(StripeObject):
    OBJECT_TAG = "customer"

    id: CustomerId
    # Negative values are credit, positive values are owed on the next invoice.
    balance: int = 0
    created: Timestamp
    currency: Optional[str] = None
    default_source: Optional[Expandable[PaymentSource]] = None
    delinquent: Optional[bool] = None
    description: Optional[str] = None
    discount: Optional[Discount] = None
    email: Optional[str] = None
    invoice_prefix: Optional[str] = None
    livemode: bool
    metadata: ReadOnlyMetadata = {}
    name: Optional[str] = None
    phone: Optional[str] = None
    shipping: Optional[ShippingDetails] = None
    sources: Optional[PaginatedList[PaymentSource]] = None
    subscriptions: Optional[PaginatedList[Subscription]] = None
    tax_exempt: Optional[TaxExempt] = None

    @classmethod
    def create(cls, client: "Client", params: Optional["CreateCustomer"] = None) -> "Customer":
        return client.post_form("/customers", params, cls)

    @classmethod
    def retrieve(
        cls,
        client: "Client",
        id: str,
        expand: Iterable[str] = (),
    ) -> "Customer":
        return client.get_query(f"/customers/{CustomerId(id)}", Expand(expand=list(expand)), cls)

    @classmethod
    def update(cls, client: "Client", id: str, params: "UpdateCustomer") -> "Customer":
        return client.post_form(f"/customers/{CustomerId(id)}", params, cls)

    @classmethod
    def delete(cls, client: "Client", id: str) -> Deleted:
        """Permanently deletes the customer and cancels its subscriptions."""
        return client.delete(f"/customers/{CustomerId(id)}", Deleted)

    @classmethod
    def list(
        cls,
        client: "Client",
        params: Optional["ListCustomers"] = None,
    ) -> PaginatedList["Customer"]:
        return client.get_query("/customers", params, PaginatedList[Customer])


class CreateCustomer(Params):
    balance: Optional[int] = None
    coupon: Optional[CouponId] = None
    description: Optional[str] = None
    email: Optional[str] = None
    expand: List[str] = Field(default_factory=list)
    invoice_prefix: Optional[str] = None
    metadata: Optional[Metadata] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    shipping: Optional[ShippingParams] = None
    # A token such as "tok_visa" or raw card details; it becomes the default source.
    source: Optional[Union[str, CardParams]] = None
    tax_exempt: Optional[TaxExempt] = None


class UpdateCustomer(Params):
    CLEARABLE = frozenset(
        {"coupon", "description", "email", "name", "phone", "shipping"}
    )

    balance: Optional[int] = None
    coupon: Optional[CouponId] = None
    default_source: Optional[PaymentSourceId] = None
    description: Optional[str] = None
    email: Optional[str] = None
    expand: List[str] = Field(default_factory=list)
    invoice_prefix: Optional[str] = None
    metadata: Optional[Metadata] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    shipping: Optional[ShippingParams] = None
    source: Optional[Union[str, CardParams]] = None
    tax_exempt: Optional[TaxExempt] = None


class ListCustomers(ListParams):
    created: Optional[TimestampFilter] = None
    email: Optional[str] = None
    ending_before: Optional[CustomerId] = None
    starting_after: Optional[CustomerId] = None


# Imported last: these modules refer back to this one.
from .payment_source import PaymentSource  # noqa: E402
from .subscription import Subscription  # noqa: E402
