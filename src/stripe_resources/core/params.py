"""
Request parameter models and the rules for turning them into a payload.

Every optional parameter has three states:

* never set: the key is left out of the request and the server keeps the
  current value;
* set to ``None``: left out as well, unless the field is listed in the
  model's ``CLEARABLE`` set, in which case an empty value is sent and the
  server clears the field;
* set to a value: sent as-is.

``metadata`` follows the API's own rules: ``{}`` clears every key and
``{"key": ""}`` clears one key.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .ids import StripeId

__all__ = [
    "Expand",
    "ListParams",
    "Metadata",
    "Params",
    "RangeQuery",
    "Timestamp",
    "TimestampFilter",
]

Timestamp = int
Metadata = Dict[str, str]


def _plain(value: Any) -> Any:
    if isinstance(value, Params):
        return value.to_payload()
    if isinstance(value, StripeId):
        return value.token
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


class Params(BaseModel):
    """Base class for the input of one API operation."""

    model_config = ConfigDict(extra="forbid")

    CLEARABLE: ClassVar[FrozenSet[str]] = frozenset()

    def to_payload(self) -> Dict[str, Any]:
        """
        Return the parameters the caller actually set, ready for encoding.

        The result contains plain Python values only: nested parameter models
        become dicts, identifiers become strings and enums their values.
        """
        payload: Dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            if name not in self.model_fields_set:
                continue
            key = field.alias or name
            value = getattr(self, name)
            if value is None:
                if name in self.CLEARABLE:
                    payload[key] = ""
                continue
            if name == "expand" and not value:
                continue
            payload[key] = _plain(value)
        return payload


class Expand(Params):
    """Query parameters of a plain retrieve call."""

    expand: List[str] = Field(default_factory=list)


class RangeQuery(Params):
    gt: Optional[Timestamp] = None
    gte: Optional[Timestamp] = None
    lt: Optional[Timestamp] = None
    lte: Optional[Timestamp] = None


TimestampFilter = Union[Timestamp, RangeQuery]


class ListParams(Params):
    """
    Cursor parameters shared by every list endpoint.

    ``starting_after`` / ``ending_before`` take the id of the last / first
    item of a previously fetched page.
    """

    ending_before: Optional[StripeId] = None
    expand: List[str] = Field(default_factory=list)
    limit: Optional[int] = Field(default=None, ge=1, le=100)
    starting_after: Optional[StripeId] = None
