"""
References the API returns either as a bare id or as the inlined object.

Which shape comes back depends on the ``expand`` option of the request that
produced the payload, so consumers handle both through the same type.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, Type, TypeVar, get_args

from pydantic import BaseModel, GetCoreSchemaHandler
from pydantic_core import core_schema

from .errors import ExpansionError
from .ids import StripeId

__all__ = ["Expandable"]

ObjectT = TypeVar("ObjectT")


def _id_type(target: Any) -> Type[StripeId]:
    if isinstance(target, type) and issubclass(target, BaseModel):
        field = target.model_fields.get("id")
        annotation = field.annotation if field is not None else None
        if isinstance(annotation, type) and issubclass(annotation, StripeId):
            return annotation
    return StripeId


class Expandable(Generic[ObjectT]):
    """
    Either the id of a ``ObjectT`` or the full ``ObjectT``.

    ``id`` works for both variants; ``object`` is only set when the
    reference was expanded.
    """

    __slots__ = ("_id", "_object")

    def __init__(self, id: StripeId, obj: Optional[ObjectT] = None) -> None:
        self._id = id
        self._object = obj

    @classmethod
    def from_id(cls, id: StripeId) -> "Expandable[Any]":
        return cls(id)

    @classmethod
    def from_object(cls, obj: Any) -> "Expandable[Any]":
        return cls(obj.id, obj)

    @property
    def id(self) -> StripeId:
        return self._id

    @property
    def is_object(self) -> bool:
        return self._object is not None

    @property
    def object(self) -> Optional[ObjectT]:
        return self._object

    def as_object(self) -> ObjectT:
        if self._object is None:
            raise ExpansionError(
                f"{self._id!r} was not expanded; request it with expand=[...]"
            )
        return self._object

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expandable):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        if self._object is None:
            return f"Expandable(id={self._id!r})"
        return f"Expandable(object={self._object!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        args = get_args(source_type)
        if not args:
            raise TypeError("Expandable must be parametrised, e.g. Expandable[Charge]")
        target = args[0]

        id_schema = core_schema.no_info_after_validator_function(
            cls.from_id, handler.generate_schema(_id_type(target))
        )
        object_schema = core_schema.no_info_after_validator_function(
            cls.from_object, handler.generate_schema(target)
        )
        return core_schema.union_schema(
            [core_schema.is_instance_schema(cls), id_schema, object_schema],
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.id.token
            ),
        )
