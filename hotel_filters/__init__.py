"""
Hotel Filters - type-tagged values and generic attribute filters.

This package demonstrates:

- Nominal numeric quantities validated once at construction time
- Discrete-value and range-value filters over record fields
- Curried filter factories that bind a field once and build many predicates

The sample data is a small hardcoded hotel list printed by the CLI.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from hotel_filters.config import Settings, get_settings
from hotel_filters.domain.catalog import sample_hotels
from hotel_filters.domain.models import (
    DistanceFromCityCenter,
    EURAmount,
    Hotel,
    StarRating,
    UserRating,
)
from hotel_filters.exceptions import (
    HotelFiltersError,
    InvalidQuantityError,
    UnknownFieldError,
    UnorderedFieldError,
)
from hotel_filters.filters import (
    all_of,
    apply_filter,
    create_discrete_value_filter,
    create_range_value_filter,
    discrete_value_filter,
    range_value_filter,
)
from hotel_filters.search import SearchCriteria, search_hotels
from hotel_filters.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "DistanceFromCityCenter",
    "EURAmount",
    "Hotel",
    "StarRating",
    "UserRating",
    "sample_hotels",
    # Errors
    "HotelFiltersError",
    "InvalidQuantityError",
    "UnknownFieldError",
    "UnorderedFieldError",
    # Filters
    "discrete_value_filter",
    "create_discrete_value_filter",
    "range_value_filter",
    "create_range_value_filter",
    "all_of",
    "apply_filter",
    # Search
    "SearchCriteria",
    "search_hotels",
    # Logging
    "configure_logging",
    "get_logger",
]
