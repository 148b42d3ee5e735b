"""
Hotel-specific filters built from the generic attribute filter library.

Usage:
    from hotel_filters.search import SearchCriteria, search_hotels

    criteria = SearchCriteria(star_ratings=[StarRating.FIVE], max_price=300)
    matches = search_hotels(sample_hotels(), criteria)
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field

from hotel_filters.domain.models import (
    DistanceFromCityCenter,
    EURAmount,
    Hotel,
    StarRating,
    UserRating,
)
from hotel_filters.filters import (
    all_of,
    apply_filter,
    create_discrete_value_filter,
    create_range_value_filter,
)
from hotel_filters.utils.logging import get_logger

log = get_logger(__name__)

HotelPredicate = Callable[[Hotel], bool]

star_rating_filter = create_discrete_value_filter("star_rating", Hotel)
reception_filter = create_discrete_value_filter("reception_24_7", Hotel)
price_per_room_filter = create_range_value_filter("price_per_room", Hotel)
user_rating_filter = create_range_value_filter("user_rating", Hotel)
distance_from_city_center_filter = create_range_value_filter("distance_from_city_center", Hotel)

five_star_predicate: HotelPredicate = star_rating_filter([StarRating.FIVE])
affordable_room_predicate: HotelPredicate = price_per_room_filter(EURAmount(0), EURAmount(100))


class SearchCriteria(BaseModel):
    """
    Ad-hoc hotel search. Unset criteria do not restrict the result.
    """

    star_ratings: Tuple[StarRating, ...] = Field((), description="Accepted star ratings; empty accepts all.")
    min_price: Optional[EURAmount] = Field(None, description="Lowest acceptable room price.")
    max_price: Optional[EURAmount] = Field(None, description="Highest acceptable room price.")
    min_user_rating: Optional[UserRating] = Field(None, description="Lowest acceptable guest rating.")
    max_user_rating: Optional[UserRating] = Field(None, description="Highest acceptable guest rating.")
    max_distance: Optional[DistanceFromCityCenter] = Field(
        None, description="Furthest acceptable distance from the city center."
    )
    reception_24_7: Optional[bool] = Field(None, description="Require (or exclude) round-the-clock reception.")

    model_config = {"frozen": True}


def build_predicate(criteria: SearchCriteria) -> HotelPredicate:
    """
    Combine the active criteria into a single predicate.

    Open-ended ranges use the quantity's natural lower bound and infinity
    (or 10 for user ratings) for the missing side.
    """
    predicates: List[HotelPredicate] = [star_rating_filter(criteria.star_ratings)]

    if criteria.min_price is not None or criteria.max_price is not None:
        predicates.append(
            price_per_room_filter(
                criteria.min_price if criteria.min_price is not None else EURAmount(0),
                criteria.max_price if criteria.max_price is not None else EURAmount(float("inf")),
            )
        )
    if criteria.min_user_rating is not None or criteria.max_user_rating is not None:
        predicates.append(
            user_rating_filter(
                criteria.min_user_rating if criteria.min_user_rating is not None else UserRating(0),
                criteria.max_user_rating if criteria.max_user_rating is not None else UserRating(10),
            )
        )
    if criteria.max_distance is not None:
        predicates.append(
            distance_from_city_center_filter(DistanceFromCityCenter(0), criteria.max_distance)
        )
    if criteria.reception_24_7 is not None:
        predicates.append(reception_filter([criteria.reception_24_7]))

    return all_of(*predicates)


def search_hotels(hotels: Iterable[Hotel], criteria: SearchCriteria) -> List[Hotel]:
    """Return hotels matching `criteria` in their original order."""
    pool = list(hotels)
    matches = apply_filter(pool, build_predicate(criteria))
    log.debug(
        "Hotel search finished",
        extra={"candidates": len(pool), "matches": len(matches), "criteria": criteria.model_dump(exclude_none=True)},
    )
    return matches


__all__ = [
    "HotelPredicate",
    "star_rating_filter",
    "reception_filter",
    "price_per_room_filter",
    "user_rating_filter",
    "distance_from_city_center_filter",
    "five_star_predicate",
    "affordable_room_predicate",
    "SearchCriteria",
    "build_predicate",
    "search_hotels",
]
