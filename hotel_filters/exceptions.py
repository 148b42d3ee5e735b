"""Common exceptions for the hotel-filters package."""

from __future__ import annotations

from typing import Optional


class HotelFiltersError(ValueError):
    """Base class for construction-time errors raised by this package."""


class InvalidQuantityError(HotelFiltersError):
    """Raised when a numeric quantity falls outside its allowed range."""

    def __init__(self, quantity: str, value: float) -> None:
        super().__init__(f"Invalid {quantity} value")
        self.quantity = quantity
        self.value = value


class UnknownFieldError(HotelFiltersError):
    """Raised when a filter is built for a field the record type does not declare."""

    def __init__(self, field_name: str, record_type: Optional[type] = None) -> None:
        owner = record_type.__name__ if record_type is not None else "record"
        super().__init__(f"Unknown field '{field_name}' on {owner}")
        self.field_name = field_name
        self.record_type = record_type


class UnorderedFieldError(HotelFiltersError):
    """Raised when a range filter targets a field whose values have no numeric order."""

    def __init__(self, field_name: str, record_type: type, annotation: object) -> None:
        label = getattr(annotation, "__name__", repr(annotation))
        super().__init__(f"Field '{field_name}' on {record_type.__name__} is {label}, not an ordered value")
        self.field_name = field_name
        self.record_type = record_type
        self.annotation = annotation


__all__ = ["HotelFiltersError", "InvalidQuantityError", "UnknownFieldError", "UnorderedFieldError"]
