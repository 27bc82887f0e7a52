"""
Public facade for the typed Stripe client.

The module re-exports the most useful pieces so integrators can
``from stripe_resources import ...`` without navigating the package.
"""

from .api import create_client
from .core import (
    ApiError,
    Client,
    ClientConfig,
    ClientParameters,
    ConfigError,
    Deleted,
    Expandable,
    ObjectTagMismatchError,
    PaginatedList,
    ParseError,
    RangeQuery,
    StripeError,
    TransportError,
    load_client_config,
)
from .core.ids import (
    ChargeId,
    CustomerId,
    PlanId,
    RefundId,
    SourceId,
    SubscriptionId,
)
from .resources import (
    CancelSubscription,
    CardParams,
    Charge,
    CreateCustomer,
    CreateRefund,
    CreateSource,
    CreateSubscription,
    Customer,
    ListCharges,
    ListCustomers,
    ListRefunds,
    ListSubscriptions,
    Refund,
    Source,
    Subscription,
    UpdateCustomer,
    UpdateRefund,
    UpdateSource,
    UpdateSubscription,
)

__all__ = (
    "ApiError",
    "CancelSubscription",
    "CardParams",
    "Charge",
    "ChargeId",
    "Client",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "CreateCustomer",
    "CreateRefund",
    "CreateSource",
    "CreateSubscription",
    "Customer",
    "CustomerId",
    "Deleted",
    "Expandable",
    "ListCharges",
    "ListCustomers",
    "ListRefunds",
    "ListSubscriptions",
    "ObjectTagMismatchError",
    "PaginatedList",
    "ParseError",
    "PlanId",
    "RangeQuery",
    "Refund",
    "RefundId",
    "Source",
    "SourceId",
    "StripeError",
    "Subscription",
    "SubscriptionId",
    "TransportError",
    "UpdateCustomer",
    "UpdateRefund",
    "UpdateSource",
    "UpdateSubscription",
    "create_client",
    "load_client_config",
)
