"""
One page of a list endpoint.
"""

from __future__ import annotations

from typing import ClassVar, Generic, Literal, Optional, Tuple, TypeVar

from .ids import StripeId
from .objects import StripeModel

__all__ = ["PaginatedList"]

ItemT = TypeVar("ItemT")


class PaginatedList(StripeModel, Generic[ItemT]):
    """
    A single page of ``ItemT`` in the order the server returned them.

    The page is never assumed complete. To fetch the next page, pass
    :attr:`last_id` as ``starting_after`` on the next list request while
    :attr:`has_more` is true.
    """

    OBJECT_TAG: ClassVar[str] = "list"

    object: Literal["list"] = "list"
    data: Tuple[ItemT, ...]
    has_more: bool
    url: str = ""
    total_count: Optional[int] = None

    def items(self) -> Tuple[ItemT, ...]:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    @property
    def first_id(self) -> Optional[StripeId]:
        if not self.data:
            return None
        return self.data[0].id  # type: ignore[attr-defined]

    @property
    def last_id(self) -> Optional[StripeId]:
        if not self.data:
            return None
        return self.data[-1].id  # type: ignore[attr-defined]
