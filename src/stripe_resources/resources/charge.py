"""
The "Charge" resource.

Charges are created by payment flows outside this package; they are read
here so refunds and customers can be followed back to them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from ..core.expandable import Expandable
from ..core.ids import ChargeId, CustomerId
from ..core.objects import ReadOnlyMetadata, StripeObject
from ..core.pagination import PaginatedList
from ..core.params import Expand, ListParams, Timestamp, TimestampFilter
from .balance_transaction import BalanceTransaction

if TYPE_CHECKING:
    from ..core.client import Client

__all__ = ["Charge", "ListCharges"]


class Charge(StripeObject):
    """
    A single attempt to move money into the account.

    ``refunds`` holds the first page of refunds issued against the charge.
    """

    OBJECT_TAG = "charge"

    id: ChargeId
    amount: int
    amount_refunded: int = 0
    balance_transaction: Optional[Expandable[BalanceTransaction]] = None
    captured: bool = False
    created: Timestamp
    currency: str
    customer: Optional[Expandable[Customer]] = None
    description: Optional[str] = None
    failure_code: Optional[str] = None
    failure_message: Optional[str] = None
    livemode: bool
    metadata: ReadOnlyMetadata = {}
    paid: bool = False
    receipt_email: Optional[str] = None
    refunded: bool = False
    refunds: Optional[PaginatedList[Refund]] = None
    statement_descriptor: Optional[str] = None
    status: str

    @classmethod
    def retrieve(
        cls,
        client: "Client",
        id: str,
        expand: Iterable[str] = (),
    ) -> "Charge":
        return client.get_query(f"/charges/{ChargeId(id)}", Expand(expand=list(expand)), cls)

    @classmethod
    def list(
        cls,
        client: "Client",
        params: Optional["ListCharges"] = None,
    ) -> PaginatedList["Charge"]:
        return client.get_query("/charges", params, PaginatedList[Charge])


class ListCharges(ListParams):
    created: Optional[TimestampFilter] = None
    customer: Optional[CustomerId] = None
    ending_before: Optional[ChargeId] = None
    starting_after: Optional[ChargeId] = None


# Imported last: these modules refer back to this one.
from .customer import Customer  # noqa: E402
from .refund import Refund  # noqa: E402
