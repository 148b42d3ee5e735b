"""
Generic attribute filter library.

Re-exports the discrete and range filters (direct and factory forms) along
with the composition helpers so callers can import from
`hotel_filters.filters` directly.
"""

from hotel_filters.filters.abstract import (
    FieldSelector,
    Predicate,
    all_of,
    apply_filter,
    field_annotation,
    is_ordered_type,
    resolve_accessor,
)
from hotel_filters.filters.discrete import create_discrete_value_filter, discrete_value_filter
from hotel_filters.filters.range import create_range_value_filter, range_value_filter

__all__ = [
    # Contracts
    "FieldSelector",
    "Predicate",
    "resolve_accessor",
    "field_annotation",
    "is_ordered_type",
    # Discrete
    "discrete_value_filter",
    "create_discrete_value_filter",
    # Range
    "range_value_filter",
    "create_range_value_filter",
    # Composition
    "all_of",
    "apply_filter",
]
