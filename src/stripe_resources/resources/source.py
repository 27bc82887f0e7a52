"""
The "Source" resource: a payment instrument created from a token or redirect flow.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Optional

from pydantic import Field

from ..core.ids import CustomerId, SourceId
from ..core.objects import ReadOnlyMetadata, StripeModel, StripeObject
from ..core.params import Expand, Metadata, Params, Timestamp
from .types import Address, AddressParams

if TYPE_CHECKING:
    from ..core.client import Client

__all__ = [
    "CreateSource",
    "Source",
    "SourceFlow",
    "SourceOwner",
    "SourceOwnerParams",
    "SourceRedirect",
    "SourceRedirectParams",
    "SourceUsage",
    "UpdateSource",
]


class SourceFlow(str, Enum):
    CODE_VERIFICATION = "code_verification"
    NONE = "none"
    RECEIVER = "receiver"
    REDIRECT = "redirect"


class SourceUsage(str, Enum):
    REUSABLE = "reusable"
    SINGLE_USE = "single_use"


class SourceOwner(StripeModel):
    address: Optional[Address] = None
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None


class SourceRedirect(StripeModel):
    return_url: str
    status: str
    url: str
    failure_reason: Optional[str] = None


class Source(StripeObject):
    OBJECT_TAG = "source"

    id: SourceId
    amount: Optional[int] = None
    client_secret: str
    created: Timestamp
    currency: Optional[str] = None
    customer: Optional[CustomerId] = None
    flow: SourceFlow
    livemode: bool
    metadata: ReadOnlyMetadata = {}
    owner: Optional[SourceOwner] = None
    redirect: Optional[SourceRedirect] = None
    statement_descriptor: Optional[str] = None
    status: str
    type: str
    usage: Optional[SourceUsage] = None

    @classmethod
    def create(cls, client: "Client", params: "CreateSource") -> "Source":
        return client.post_form("/sources", params, cls)

    @classmethod
    def retrieve(
        cls,
        client: "Client",
        id: str,
        expand: Iterable[str] = (),
    ) -> "Source":
        return client.get_query(f"/sources/{SourceId(id)}", Expand(expand=list(expand)), cls)

    @classmethod
    def update(cls, client: "Client", id: str, params: "UpdateSource") -> "Source":
        """Only ``metadata`` and ``owner`` can change once a source exists."""
        return client.post_form(f"/sources/{SourceId(id)}", params, cls)


class SourceOwnerParams(Params):
    address: Optional[AddressParams] = None
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None


class SourceRedirectParams(Params):
    return_url: str


class CreateSource(Params):
    type: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    customer: Optional[CustomerId] = None
    expand: List[str] = Field(default_factory=list)
    flow: Optional[SourceFlow] = None
    metadata: Optional[Metadata] = None
    owner: Optional[SourceOwnerParams] = None
    redirect: Optional[SourceRedirectParams] = None
    statement_descriptor: Optional[str] = None
    token: Optional[str] = None
    usage: Optional[SourceUsage] = None


class UpdateSource(Params):
    expand: List[str] = Field(default_factory=list)
    metadata: Optional[Metadata] = None
    owner: Optional[SourceOwnerParams] = None
