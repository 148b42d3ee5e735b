"""
Discrete-value filters: match a field against exact values.

The direct form compares one record against one value. The factory form
binds the field once and returns a builder that turns an allow-list into a
reusable predicate. An empty allow-list means "no restriction": the
resulting predicate matches every record. That rule belongs to the factory
form only; the direct form is plain equality.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, TypeVar

from hotel_filters.filters.abstract import FieldSelector, describe_field, resolve_accessor
from hotel_filters.utils.logging import get_logger

T = TypeVar("T")

log = get_logger(__name__)


def discrete_value_filter(record: T, field: FieldSelector[T], value: Any) -> bool:
    """True iff the selected field of `record` equals `value`."""
    return resolve_accessor(field)(record) == value


def create_discrete_value_filter(
    field: FieldSelector[T], record_type: Optional[type] = None
) -> Callable[[Iterable[Any]], Callable[[T], bool]]:
    """
    Bind `field` and return a builder of allow-list predicates.

    Each call of the builder snapshots its values, so predicates built from
    the same factory never share state.
    """
    accessor = resolve_accessor(field, record_type)

    def _build(values: Iterable[Any]) -> Callable[[T], bool]:
        allowed = tuple(values)
        log.debug("Discrete filter built", extra={"field": describe_field(field), "values": len(allowed)})

        def _predicate(record: T) -> bool:
            if not allowed:
                return True
            candidate = accessor(record)
            return any(candidate == value for value in allowed)

        return _predicate

    return _build


__all__ = ["discrete_value_filter", "create_discrete_value_filter"]
