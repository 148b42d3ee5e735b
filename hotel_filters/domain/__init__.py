"""
Domain package for the hotel filter demo.

Exports the nominal quantity types, the Hotel record, and the sample catalog.
Keep this package focused on data definitions and validation concerns.
"""

from hotel_filters.domain.catalog import sample_hotels
from hotel_filters.domain.models import (
    DistanceFromCityCenter,
    EURAmount,
    Hotel,
    StarRating,
    UserRating,
    number_to_distance_from_city_center,
    number_to_eur_amount,
    number_to_user_rating,
)

__all__ = [
    "DistanceFromCityCenter",
    "EURAmount",
    "Hotel",
    "StarRating",
    "UserRating",
    "number_to_distance_from_city_center",
    "number_to_eur_amount",
    "number_to_user_rating",
    "sample_hotels",
]
