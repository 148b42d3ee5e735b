"""
Range-value filters: match a numeric field against inclusive bounds.

Bounds are not validated. When `min_value > max_value` no value can satisfy
both comparisons, so the predicate is false for every record.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from hotel_filters.exceptions import UnorderedFieldError
from hotel_filters.filters.abstract import (
    FieldSelector,
    describe_field,
    field_annotation,
    is_ordered_type,
    resolve_accessor,
)
from hotel_filters.utils.logging import get_logger

T = TypeVar("T")

log = get_logger(__name__)


def range_value_filter(record: T, field: FieldSelector[T], min_value: Any, max_value: Any) -> bool:
    """True iff `min_value <= field <= max_value` for `record`."""
    value = resolve_accessor(field)(record)
    return min_value <= value <= max_value


def create_range_value_filter(
    field: FieldSelector[T], record_type: Optional[type] = None
) -> Callable[[Any, Any], Callable[[T], bool]]:
    """
    Bind `field` and return a builder of inclusive-range predicates.

    With `record_type`, the field must be declared and hold numbers or an
    ordered enum; anything else raises UnorderedFieldError here rather than
    failing later on the first comparison.
    """
    accessor = resolve_accessor(field, record_type)
    if record_type is not None and isinstance(field, str):
        annotation = field_annotation(record_type, field)
        if annotation is not None and not is_ordered_type(annotation):
            raise UnorderedFieldError(field, record_type, annotation)

    def _build(min_value: Any, max_value: Any) -> Callable[[T], bool]:
        if min_value > max_value:
            log.warning(
                "Range filter built with inverted bounds; it will match nothing",
                extra={"field": describe_field(field), "min_value": min_value, "max_value": max_value},
            )

        def _predicate(record: T) -> bool:
            return min_value <= accessor(record) <= max_value

        return _predicate

    return _build


__all__ = ["range_value_filter", "create_range_value_filter"]
