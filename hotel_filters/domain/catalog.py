"""
Hardcoded sample hotels used by the CLI report.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from hotel_filters.domain.models import (
    Hotel,
    StarRating,
    number_to_distance_from_city_center,
    number_to_eur_amount,
    number_to_user_rating,
)
from hotel_filters.utils.logging import get_logger

log = get_logger(__name__)


@lru_cache(maxsize=1)
def sample_hotels() -> Tuple[Hotel, ...]:
    """
    Build the sample hotels once and return them in display order.

    Raises InvalidQuantityError if any literal violates its quantity range.
    """
    hotels = (
        Hotel(
            name="Hostel 1",
            star_rating=StarRating.ONE,
            user_rating=number_to_user_rating(6.9),
            distance_from_city_center=number_to_distance_from_city_center(4.0),
            price_per_room=number_to_eur_amount(20),
            reception_24_7=True,
        ),
        Hotel(
            name="Test 1",
            star_rating=StarRating.THREE,
            user_rating=number_to_user_rating(7.9),
            distance_from_city_center=number_to_distance_from_city_center(1.8),
            price_per_room=number_to_eur_amount(90),
            reception_24_7=False,
        ),
        Hotel(
            name="Test 5🌟",
            star_rating=StarRating.FIVE,
            user_rating=number_to_user_rating(9.8),
            distance_from_city_center=number_to_distance_from_city_center(0.7),
            price_per_room=number_to_eur_amount(260),
            reception_24_7=True,
        ),
    )
    log.debug("Sample hotels loaded", extra={"hotels": len(hotels)})
    return hotels


__all__ = ["sample_hotels"]
