"""
Shared contracts for attribute filters.

A predicate is a pure callable `record -> bool` that closes over its
construction-time parameters only. Fields are selected either by name
(read with attribute access) or by an explicit accessor callable.
"""

from __future__ import annotations

from enum import Enum
from operator import attrgetter
from typing import (
    Any,
    Callable,
    Iterable,
    List,
    Optional,
    Protocol,
    TypeVar,
    Union,
    get_type_hints,
    runtime_checkable,
)

from hotel_filters.exceptions import UnknownFieldError

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

FieldSelector = Union[str, Callable[[T], Any]]


@runtime_checkable
class Predicate(Protocol[T_contra]):
    """
    Pure test of a single record.
    """

    def __call__(self, record: T_contra) -> bool:
        ...


def resolve_accessor(field: FieldSelector[T], record_type: Optional[type] = None) -> Callable[[T], Any]:
    """
    Turn a field selector into an accessor callable.

    Parameters
    ----------
    field : str | Callable
        Field name or accessor function.
    record_type : type | None
        When given and the type declares its fields (pydantic models,
        dataclasses), unknown field names are rejected up front.

    Raises
    ------
    UnknownFieldError
        If `field` names an attribute `record_type` does not declare.
    """
    if callable(field):
        return field
    if record_type is not None:
        declared = _declared_fields(record_type)
        if declared is not None and field not in declared:
            raise UnknownFieldError(field, record_type)
    return attrgetter(field)


def _declared_fields(record_type: type) -> Optional[frozenset[str]]:
    model_fields = getattr(record_type, "model_fields", None)
    if isinstance(model_fields, dict):
        return frozenset(model_fields)
    dataclass_fields = getattr(record_type, "__dataclass_fields__", None)
    if isinstance(dataclass_fields, dict):
        return frozenset(dataclass_fields)
    return None


def field_annotation(record_type: type, field_name: str) -> Optional[Any]:
    """
    Resolved type of `field_name` on `record_type`, or None when unknown.
    """
    model_fields = getattr(record_type, "model_fields", None)
    if isinstance(model_fields, dict) and field_name in model_fields:
        return model_fields[field_name].annotation
    try:
        hints = get_type_hints(record_type)
    except (NameError, TypeError):
        return None
    return hints.get(field_name)


def is_ordered_type(annotation: Any) -> bool:
    """
    True for numbers (bool excluded) and for enums that define their own order.
    """
    if not isinstance(annotation, type):
        return False
    if issubclass(annotation, bool):
        return False
    if issubclass(annotation, (int, float)):
        return True
    return issubclass(annotation, Enum) and annotation.__lt__ is not object.__lt__


def describe_field(field: FieldSelector[Any]) -> str:
    """Short label for a field selector, used in log records."""
    return field if isinstance(field, str) else getattr(field, "__name__", repr(field))


def all_of(*predicates: Callable[[T], bool]) -> Callable[[T], bool]:
    """Conjunction of `predicates`; with none given, every record matches."""
    chain = tuple(predicates)

    def _all(record: T) -> bool:
        return all(predicate(record) for predicate in chain)

    return _all


def apply_filter(records: Iterable[T], predicate: Callable[[T], bool]) -> List[T]:
    """Return the records matching `predicate`, preserving input order."""
    return [record for record in records if predicate(record)]


__all__ = [
    "FieldSelector",
    "Predicate",
    "resolve_accessor",
    "field_annotation",
    "is_ordered_type",
    "describe_field",
    "all_of",
    "apply_filter",
]
