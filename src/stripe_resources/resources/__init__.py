"""
Models for the API resources and the operations each one supports.
"""

from .balance_transaction import BalanceTransaction
from .charge import Charge, ListCharges
from .customer import CreateCustomer, Customer, ListCustomers, TaxExempt, UpdateCustomer
from .discount import Coupon, Discount
from .issuing import MerchantData
from .payment_source import BankAccount, Card, PaymentSource
from .refund import CreateRefund, ListRefunds, Refund, RefundReason, UpdateRefund
from .source import (
    CreateSource,
    Source,
    SourceFlow,
    SourceOwner,
    SourceOwnerParams,
    SourceRedirect,
    SourceRedirectParams,
    SourceUsage,
    UpdateSource,
)
from .subscription import (
    CancelSubscription,
    CollectionMethod,
    CreateSubscription,
    ListSubscriptions,
    Plan,
    PlanInterval,
    Subscription,
    SubscriptionItem,
    SubscriptionItemParams,
    SubscriptionStatus,
    SubscriptionStatusFilter,
    TrialEnd,
    UpdateSubscription,
)
from .transfer_reversal import TransferReversal
from .types import Address, AddressParams, CardParams, ShippingDetails, ShippingParams

# The models below refer to each other; resolve the references now that every
# module is loaded.
for _model in (BankAccount, Card, Charge, Customer, Refund, Subscription):
    _model.model_rebuild()
del _model

__all__ = [
    "Address",
    "AddressParams",
    "BalanceTransaction",
    "BankAccount",
    "CancelSubscription",
    "Card",
    "CardParams",
    "Charge",
    "CollectionMethod",
    "Coupon",
    "CreateCustomer",
    "CreateRefund",
    "CreateSource",
    "CreateSubscription",
    "Customer",
    "Discount",
    "ListCharges",
    "ListCustomers",
    "ListRefunds",
    "ListSubscriptions",
    "MerchantData",
    "PaymentSource",
    "Plan",
    "PlanInterval",
    "Refund",
    "RefundReason",
    "ShippingDetails",
    "ShippingParams",
    "Source",
    "SourceFlow",
    "SourceOwner",
    "SourceOwnerParams",
    "SourceRedirect",
    "SourceRedirectParams",
    "SourceUsage",
    "Subscription",
    "SubscriptionItem",
    "SubscriptionItemParams",
    "SubscriptionStatus",
    "SubscriptionStatusFilter",
    "TaxExempt",
    "TransferReversal",
    "TrialEnd",
    "UpdateCustomer",
    "UpdateRefund",
    "UpdateSource",
]
