"""
The "BalanceTransaction" resource, referenced by charges, refunds and reversals.
"""

from __future__ import annotations

from typing import Optional

from ..core.ids import BalanceTransactionId
from ..core.objects import StripeObject
from ..core.params import Timestamp

__all__ = ["BalanceTransaction"]


class BalanceTransaction(StripeObject):
    """Movement of funds on the account balance."""

    OBJECT_TAG = "balance_transaction"

    id: BalanceTransactionId
    amount: int
    available_on: Timestamp
    created: Timestamp
    currency: str
    description: Optional[str] = None
    fee: int = 0
    net: int
    reporting_category: Optional[str] = None
    status: str
    type: str
