"""
Marshalling primitives and the HTTP transport shared by every resource.
"""

from .client import Client
from .config import (
    ClientConfig,
    ClientParameters,
    load_client_config,
)
from .encoding import encode_params
from .environment import ClientEnvironment, build_environment, load_env_file
from .errors import (
    ApiError,
    AuthenticationError,
    CardError,
    ConfigError,
    ExpansionError,
    IdempotencyError,
    InvalidIdError,
    InvalidRequestError,
    ObjectTagMismatchError,
    ParseError,
    RateLimitError,
    StripeError,
    TransportError,
)
from .expandable import Expandable
from .objects import Deleted, StripeModel, StripeObject, check_object_tag
from .pagination import PaginatedList
from .params import Expand, ListParams, Metadata, Params, RangeQuery, Timestamp

__all__ = [
    "ApiError",
    "AuthenticationError",
    "CardError",
    "Client",
    "ClientConfig",
    "ClientEnvironment",
    "ClientParameters",
    "ConfigError",
    "Deleted",
    "Expand",
    "Expandable",
    "ExpansionError",
    "IdempotencyError",
    "InvalidIdError",
    "InvalidRequestError",
    "ListParams",
    "Metadata",
    "ObjectTagMismatchError",
    "PaginatedList",
    "Params",
    "ParseError",
    "RangeQuery",
    "RateLimitError",
    "StripeError",
    "StripeModel",
    "StripeObject",
    "Timestamp",
    "TransportError",
    "build_environment",
    "check_object_tag",
    "encode_params",
    "load_client_config",
    "load_env_file",
]
