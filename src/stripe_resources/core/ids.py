"""
Identifier types, one per resource kind.

Every identifier is a ``str`` subclass so it can be used wherever the raw
token is expected (URLs, logs, JSON), but two identifiers of different kinds
never compare equal and cannot be converted into one another.
"""

from __future__ import annotations

from typing import Any, ClassVar, Tuple

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .errors import InvalidIdError

__all__ = [
    "AccountId",
    "BalanceTransactionId",
    "BankAccountId",
    "CardId",
    "ChargeId",
    "CouponId",
    "CustomerId",
    "PaymentSourceId",
    "PlanId",
    "RefundId",
    "SourceId",
    "StripeId",
    "SubscriptionId",
    "SubscriptionItemId",
    "TransferReversalId",
]


class StripeId(str):
    """
    Opaque resource identifier.

    Subclasses list the wire prefixes their tokens start with in ``PREFIXES``;
    an empty tuple accepts any non-empty token.

    Two identifiers compare equal when their tokens match and one kind is a
    subclass of the other, so the untyped base matches every kind and
    ``PaymentSourceId`` matches the card, source and bank account kinds.
    """

    PREFIXES: ClassVar[Tuple[str, ...]] = ()

    def __new__(cls, value: Any) -> "StripeId":
        if isinstance(value, StripeId) and not _related(type(value), cls):
            raise InvalidIdError(
                f"{type(value).__name__} {str(value)!r} cannot be used as a {cls.__name__}"
            )
        if not isinstance(value, str):
            raise InvalidIdError(
                f"{cls.__name__} must be built from a string, got {type(value).__name__}"
            )
        if not value:
            raise InvalidIdError(f"{cls.__name__} must not be empty")
        if cls.PREFIXES and not value.startswith(cls.PREFIXES):
            expected = ", ".join(repr(prefix) for prefix in cls.PREFIXES)
            raise InvalidIdError(
                f"{value!r} is not a valid {cls.__name__} (expected prefix {expected})"
            )
        return super().__new__(cls, value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StripeId) and not _related(type(self), type(other)):
            return False
        return str.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = str.__hash__

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"

    @property
    def token(self) -> str:
        """The raw token as a plain ``str``."""
        return str.__str__(self)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.token
            ),
        )


class AccountId(StripeId):
    PREFIXES = ("acct_",)


class BalanceTransactionId(StripeId):
    PREFIXES = ("txn_",)


class ChargeId(StripeId):
    PREFIXES = ("ch_", "py_")


class CouponId(StripeId):
    pass


class CustomerId(StripeId):
    PREFIXES = ("cus_",)


class PaymentSourceId(StripeId):
    """Any object that can be attached to a customer as a payment source."""

    PREFIXES = ("card_", "src_", "ba_")


class BankAccountId(PaymentSourceId):
    PREFIXES = ("ba_",)


class CardId(PaymentSourceId):
    PREFIXES = ("card_",)


class SourceId(PaymentSourceId):
    PREFIXES = ("src_",)


class PlanId(StripeId):
    pass


class RefundId(StripeId):
    PREFIXES = ("re_", "pyr_")


class SubscriptionId(StripeId):
    PREFIXES = ("sub_",)


class SubscriptionItemId(StripeId):
    PREFIXES = ("si_",)


class TransferReversalId(StripeId):
    PREFIXES = ("trr_",)


def _related(left: type, right: type) -> bool:
    return issubclass(left, right) or issubclass(right, left)
