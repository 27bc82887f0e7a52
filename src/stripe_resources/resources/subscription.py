"""
The "Subscription" resource and the items and plans it bills for.

For more details see https://stripe.com/docs/api/subscriptions/object.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, List, Literal, Optional, Union

from pydantic import AliasChoices, Field, field_validator

from ..core.expandable import Expandable
from ..core.ids import (
    CouponId,
    CustomerId,
    PaymentSourceId,
    PlanId,
    SubscriptionId,
    SubscriptionItemId,
)
from ..core.objects import ReadOnlyMetadata, StripeObject
from ..core.pagination import PaginatedList
from ..core.params import Expand, ListParams, Metadata, Params, Timestamp, TimestampFilter
from .discount import Discount

if TYPE_CHECKING:
    from ..core.client import Client

__all__ = [
    "CancelSubscription",
    "CollectionMethod",
    "CreateSubscription",
    "ListSubscriptions",
    "Plan",
    "PlanInterval",
    "Subscription",
    "SubscriptionItem",
    "SubscriptionItemParams",
    "SubscriptionStatus",
    "SubscriptionStatusFilter",
    "TrialEnd",
    "UpdateSubscription",
]


class CollectionMethod(str, Enum):
    CHARGE_AUTOMATICALLY = "charge_automatically"
    SEND_INVOICE = "send_invoice"


class SubscriptionStatus(str, Enum):
    ACTIVE = "active"
    CANCELED = "canceled"
    INCOMPLETE = "incomplete"
    INCOMPLETE_EXPIRED = "incomplete_expired"
    PAST_DUE = "past_due"
    PAUSED = "paused"
    TRIALING = "trialing"
    UNPAID = "unpaid"


class SubscriptionStatusFilter(str, Enum):
    """Values accepted by the ``status`` filter of the list endpoint."""

    ACTIVE = "active"
    ALL = "all"
    CANCELED = "canceled"
    ENDED = "ended"
    INCOMPLETE = "incomplete"
    INCOMPLETE_EXPIRED = "incomplete_expired"
    PAST_DUE = "past_due"
    PAUSED = "paused"
    TRIALING = "trialing"
    UNPAID = "unpaid"


class PlanInterval(str, Enum):
    DAY = "day"
    MONTH = "month"
    WEEK = "week"
    YEAR = "year"


# A timestamp, or "now" to end the trial immediately.
TrialEnd = Union[Timestamp, Literal["now"]]


class Plan(StripeObject):
    OBJECT_TAG = "plan"

    id: PlanId
    active: bool = True
    amount: Optional[int] = None
    created: Timestamp
    currency: str
    interval: PlanInterval
    interval_count: int = 1
    livemode: bool
    metadata: ReadOnlyMetadata = {}
    nickname: Optional[str] = None
    product: Optional[str] = None
    trial_period_days: Optional[int] = None


class SubscriptionItem(StripeObject):
    OBJECT_TAG = "subscription_item"

    id: SubscriptionItemId
    created: Timestamp
    metadata: ReadOnlyMetadata = {}
    plan: Plan
    quantity: Optional[int] = None
    subscription: Optional[SubscriptionId] = None


class Subscription(StripeObject):
    OBJECT_TAG = "subscription"

    id: SubscriptionId
    # Percentage of each invoice transferred to the application owner, 0-100.
    application_fee_percent: Optional[float] = None
    billing_cycle_anchor: Timestamp
    cancel_at_period_end: bool = False
    canceled_at: Optional[Timestamp] = None
    # Older API versions call this field "billing".
    collection_method: Optional[CollectionMethod] = Field(
        default=None,
        validation_alias=AliasChoices("collection_method", "billing"),
    )
    created: Timestamp
    current_period_end: Timestamp
    current_period_start: Timestamp
    customer: Expandable[Customer]
    # Only set when collection_method is send_invoice.
    days_until_due: Optional[int] = None
    default_payment_method: Optional[str] = None
    default_source: Optional[Expandable[PaymentSource]] = None
    discount: Optional[Discount] = None
    ended_at: Optional[Timestamp] = None
    items: PaginatedList[SubscriptionItem]
    latest_invoice: Optional[str] = None
    livemode: bool
    metadata: ReadOnlyMetadata = {}
    # Only set when the subscription has a single plan.
    plan: Optional[Plan] = None
    quantity: Optional[int] = None
    start_date: Optional[Timestamp] = None
    status: SubscriptionStatus
    trial_end: Optional[Timestamp] = None
    trial_start: Optional[Timestamp] = None

    @field_validator("default_payment_method", "latest_invoice", mode="before")
    @classmethod
    def keep_id_only(cls, value: Any) -> Any:
        # No models exist for invoices or payment methods; keep the id when expanded.
        if isinstance(value, dict):
            return value.get("id")
        return value

    @classmethod
    def create(cls, client: "Client", params: "CreateSubscription") -> "Subscription":
        return client.post_form("/subscriptions", params, cls)

    @classmethod
    def retrieve(
        cls,
        client: "Client",
        id: str,
        expand: Iterable[str] = (),
    ) -> "Subscription":
        return client.get_query(
            f"/subscriptions/{SubscriptionId(id)}", Expand(expand=list(expand)), cls
        )

    @classmethod
    def update(
        cls,
        client: "Client",
        id: str,
        params: "UpdateSubscription",
    ) -> "Subscription":
        return client.post_form(f"/subscriptions/{SubscriptionId(id)}", params, cls)

    @classmethod
    def cancel(
        cls,
        client: "Client",
        id: str,
        params: Optional["CancelSubscription"] = None,
    ) -> "Subscription":
        """
        Cancels the subscription immediately.

        To cancel at the end of the period instead, use :meth:`update` with
        ``cancel_at_period_end=True``.
        """
        return client.delete_query(f"/subscriptions/{SubscriptionId(id)}", params, cls)

    @classmethod
    def list(
        cls,
        client: "Client",
        params: Optional["ListSubscriptions"] = None,
    ) -> PaginatedList["Subscription"]:
        """
        By default, returns subscriptions that have not been canceled.

        Use ``status=SubscriptionStatusFilter.CANCELED`` or ``ALL`` to include
        canceled ones.
        """
        return client.get_query("/subscriptions", params, PaginatedList[Subscription])


class SubscriptionItemParams(Params):
    plan: PlanId
    metadata: Optional[Metadata] = None
    quantity: Optional[int] = None


class CreateSubscription(Params):
    customer: CustomerId
    application_fee_percent: Optional[float] = None
    billing_cycle_anchor: Optional[Timestamp] = None
    collection_method: Optional[CollectionMethod] = None
    coupon: Optional[CouponId] = None
    days_until_due: Optional[int] = None
    default_source: Optional[PaymentSourceId] = None
    expand: List[str] = Field(default_factory=list)
    items: Optional[List[SubscriptionItemParams]] = None
    metadata: Optional[Metadata] = None
    # Single-plan shorthand for items=[SubscriptionItemParams(plan=..., quantity=...)].
    plan: Optional[PlanId] = None
    prorate: Optional[bool] = None
    quantity: Optional[int] = None
    # A card token; it becomes the customer's default source before the first invoice.
    source: Optional[str] = None
    tax_percent: Optional[float] = None
    trial_end: Optional[TrialEnd] = None
    trial_period_days: Optional[int] = None


class UpdateSubscription(Params):
    CLEARABLE = frozenset({"coupon", "default_source"})

    application_fee_percent: Optional[float] = None
    cancel_at_period_end: Optional[bool] = None
    collection_method: Optional[CollectionMethod] = None
    coupon: Optional[CouponId] = None
    days_until_due: Optional[int] = None
    default_source: Optional[PaymentSourceId] = None
    expand: List[str] = Field(default_factory=list)
    items: Optional[List[SubscriptionItemParams]] = None
    # {} removes every key; leaving it unset keeps the current metadata.
    metadata: Optional[Metadata] = None
    plan: Optional[PlanId] = None
    prorate: Optional[bool] = None
    proration_date: Optional[Timestamp] = None
    quantity: Optional[int] = None
    source: Optional[str] = None
    tax_percent: Optional[float] = None
    trial_end: Optional[TrialEnd] = None


class CancelSubscription(Params):
    # Generate a final invoice for any un-invoiced usage.
    invoice_now: Optional[bool] = None
    prorate: Optional[bool] = None


class ListSubscriptions(ListParams):
    collection_method: Optional[CollectionMethod] = None
    created: Optional[TimestampFilter] = None
    current_period_end: Optional[TimestampFilter] = None
    current_period_start: Optional[TimestampFilter] = None
    customer: Optional[CustomerId] = None
    ending_before: Optional[SubscriptionId] = None
    plan: Optional[PlanId] = None
    starting_after: Optional[SubscriptionId] = None
    status: Optional[SubscriptionStatusFilter] = None


# Imported last: these modules refer back to this one.
from .customer import Customer  # noqa: E402
from .payment_source import PaymentSource  # noqa: E402
