"""
The "TransferReversal" resource.
"""

from __future__ import annotations

from typing import Optional

from ..core.expandable import Expandable
from ..core.ids import TransferReversalId
from ..core.objects import ReadOnlyMetadata, StripeObject
from ..core.params import Timestamp
from .balance_transaction import BalanceTransaction

__all__ = ["TransferReversal"]


class TransferReversal(StripeObject):
    OBJECT_TAG = "transfer_reversal"

    id: TransferReversalId
    amount: int
    balance_transaction: Optional[Expandable[BalanceTransaction]] = None
    created: Timestamp
    currency: str
    destination_payment_refund: Optional[str] = None
    metadata: ReadOnlyMetadata = {}
    source_refund: Optional[str] = None
    transfer: Optional[str] = None
