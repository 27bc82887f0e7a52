"""
The "Refund" resource.

For more details see https://stripe.com/docs/api/refunds/object.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Optional

from pydantic import Field

from ..core.expandable import Expandable
from ..core.ids import ChargeId, RefundId
from ..core.objects import ReadOnlyMetadata, StripeObject
from ..core.pagination import PaginatedList
from ..core.params import Expand, ListParams, Metadata, Params, Timestamp, TimestampFilter
from .balance_transaction import BalanceTransaction
from .transfer_reversal import TransferReversal

if TYPE_CHECKING:
    from ..core.client import Client

__all__ = [
    "CreateRefund",
    "ListRefunds",
    "Refund",
    "RefundReason",
    "UpdateRefund",
]


class RefundReason(str, Enum):
    DUPLICATE = "duplicate"
    FRAUDULENT = "fraudulent"
    REQUESTED_BY_CUSTOMER = "requested_by_customer"


class Refund(StripeObject):
    OBJECT_TAG = "refund"

    id: RefundId
    amount: int
    balance_transaction: Optional[Expandable[BalanceTransaction]] = None
    charge: Optional[Expandable[Charge]] = None
    created: Timestamp
    currency: str
    description: Optional[str] = None
    failure_balance_transaction: Optional[Expandable[BalanceTransaction]] = None
    # lost_or_stolen_card, expired_or_canceled_card or unknown
    failure_reason: Optional[str] = None
    metadata: ReadOnlyMetadata = {}
    # The API has added reasons over time, so this is not the RefundReason enum.
    reason: Optional[str] = None
    receipt_number: Optional[str] = None
    source_transfer_reversal: Optional[Expandable[TransferReversal]] = None
    status: Optional[str] = None
    transfer_reversal: Optional[Expandable[TransferReversal]] = None

    @classmethod
    def list(
        cls,
        client: "Client",
        params: Optional["ListRefunds"] = None,
    ) -> PaginatedList["Refund"]:
        """
        Returns refunds you've previously created, most recent first.

        Pass ``ListRefunds(charge=...)`` to restrict the page to one charge.
        """
        return client.get_query("/refunds", params, PaginatedList[Refund])

    @classmethod
    def create(cls, client: "Client", params: "CreateRefund") -> "Refund":
        return client.post_form("/refunds", params, cls)

    @classmethod
    def retrieve(
        cls,
        client: "Client",
        id: str,
        expand: Iterable[str] = (),
    ) -> "Refund":
        return client.get_query(f"/refunds/{RefundId(id)}", Expand(expand=list(expand)), cls)

    @classmethod
    def update(cls, client: "Client", id: str, params: "UpdateRefund") -> "Refund":
        """
        Updates the refund's metadata.

        Any parameters not provided are left unchanged.
        """
        return client.post_form(f"/refunds/{RefundId(id)}", params, cls)


class CreateRefund(Params):
    amount: Optional[int] = None
    charge: Optional[ChargeId] = None
    expand: List[str] = Field(default_factory=list)
    metadata: Optional[Metadata] = None
    reason: Optional[RefundReason] = None
    refund_application_fee: Optional[bool] = None
    reverse_transfer: Optional[bool] = None


class ListRefunds(ListParams):
    charge: Optional[ChargeId] = None
    created: Optional[TimestampFilter] = None
    ending_before: Optional[RefundId] = None
    starting_after: Optional[RefundId] = None


class UpdateRefund(Params):
    expand: List[str] = Field(default_factory=list)
    # {} removes every key; {"key": ""} removes one key.
    metadata: Optional[Metadata] = None


# Imported last: refers back to this module.
from .charge import Charge  # noqa: E402
