"""
Base model for API resources and the identity contract they share.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Any, ClassVar, Dict, Literal, Mapping, Optional, Type, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    PlainSerializer,
    ValidationError,
    computed_field,
    model_validator,
)

from .errors import ObjectTagMismatchError, ParseError
from .ids import StripeId

__all__ = [
    "Deleted",
    "ReadOnlyMetadata",
    "StripeModel",
    "StripeObject",
    "check_object_tag",
]

ModelT = TypeVar("ModelT", bound="StripeModel")


def _read_only(value: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(value))


# Metadata as returned by the API: a read-only view that dumps back to a dict.
ReadOnlyMetadata = Annotated[
    Mapping[str, str],
    AfterValidator(_read_only),
    PlainSerializer(dict, return_type=Dict[str, str]),
]


class StripeModel(BaseModel):
    """
    Immutable value parsed from an API payload.

    Unknown fields are ignored so that new fields added by the API do not
    break parsing. Defaults are validated too, so a defaulted ``metadata`` is
    read-only like a parsed one.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", validate_default=True)

    @classmethod
    def parse(cls: Type[ModelT], payload: Any) -> ModelT:
        """Validate a decoded JSON value, raising :class:`ParseError` on mismatch."""
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise ParseError(
                f"Payload does not match {cls.__name__}: {exc.error_count()} error(s)",
                {"errors": exc.errors(include_url=False)},
            ) from exc


class StripeObject(StripeModel):
    """
    A resource with its own identifier and ``object`` tag.

    Subclasses set ``OBJECT_TAG`` to the discriminator the API puts in the
    ``object`` field and type ``id`` with the matching identifier class.
    """

    OBJECT_TAG: ClassVar[str]

    id: StripeId

    @classmethod
    def object_tag(cls) -> str:
        return cls.OBJECT_TAG

    def __hash__(self) -> int:
        return hash((self.OBJECT_TAG, self.id))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def object(self) -> str:
        return self.OBJECT_TAG

    @model_validator(mode="before")
    @classmethod
    def reject_foreign_tag(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            tag = data.get("object")
            if tag is not None and tag != cls.OBJECT_TAG:
                raise ValueError(
                    f"payload tagged {tag!r} cannot be parsed as {cls.OBJECT_TAG!r}"
                )
        return data


class Deleted(StripeModel):
    """Marker returned by delete endpoints."""

    id: str
    object: str
    deleted: Literal[True]


def check_object_tag(model: type, payload: Any) -> None:
    """
    Raise :class:`ObjectTagMismatchError` if ``payload`` is tagged for another type.

    Types without an ``OBJECT_TAG`` (value types, :class:`Deleted`) are not
    checked, and neither are payloads that carry no ``object`` field.
    """
    expected: Optional[str] = getattr(model, "OBJECT_TAG", None)
    if expected is None or not isinstance(payload, dict):
        return
    actual = payload.get("object")
    if actual is not None and actual != expected:
        raise ObjectTagMismatchError(expected, actual)
