"""
Domain models for the hotel filter demo.

Numeric quantities (user rating, distance, price) are nominal wrapper types:
each is a distinct `float` subclass that can only be built through its
validating constructor, so an out-of-range value never exists once a record
is constructed. `Hotel` is a frozen pydantic model that runs raw numbers
through those constructors.
"""
from __future__ import annotations

import math
from enum import Enum
from functools import total_ordering
from typing import Any, ClassVar

from pydantic import BaseModel, Field, GetCoreSchemaHandler
from pydantic_core import core_schema

from hotel_filters.exceptions import InvalidQuantityError


@total_ordering
class StarRating(Enum):
    """
    Official star classification, ordered from one to five.

    Members only compare with other members, never with plain ints.
    """

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StarRating):
            return NotImplemented
        return self.value < other.value


class _BoundedQuantity(float):
    """
    Base for validated numeric quantities.

    Subclasses set `minimum` and optionally `maximum` (both inclusive).
    NaN is never a valid quantity.
    """

    minimum: ClassVar[float] = 0.0
    maximum: ClassVar[float | None] = None

    def __new__(cls, value: float) -> "_BoundedQuantity":
        number = float(value)
        if math.isnan(number) or number < cls.minimum or (cls.maximum is not None and number > cls.maximum):
            raise InvalidQuantityError(cls.__name__, number)
        return super().__new__(cls, number)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.float_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(float),
        )


class UserRating(_BoundedQuantity):
    """Guest review score on a 0-10 scale."""

    minimum = 0.0
    maximum = 10.0


class DistanceFromCityCenter(_BoundedQuantity):
    """Distance to the city center in kilometres."""

    minimum = 0.0


class EURAmount(_BoundedQuantity):
    """Amount of money in euros."""

    minimum = 0.0


def number_to_user_rating(value: float) -> UserRating:
    return UserRating(value)


def number_to_distance_from_city_center(value: float) -> DistanceFromCityCenter:
    return DistanceFromCityCenter(value)


def number_to_eur_amount(value: float) -> EURAmount:
    return EURAmount(value)


class Hotel(BaseModel):
    """
    A single hotel offer.
    """

    name: str = Field(..., description="Display name.")
    star_rating: StarRating = Field(..., description="Official star classification.")
    user_rating: UserRating = Field(..., description="Average guest rating (0-10).")
    distance_from_city_center: DistanceFromCityCenter = Field(
        ..., description="Distance to the city center in km."
    )
    price_per_room: EURAmount = Field(..., description="Nightly room price in EUR.")
    reception_24_7: bool = Field(False, description="Whether reception is staffed around the clock.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }


__all__ = [
    "StarRating",
    "UserRating",
    "DistanceFromCityCenter",
    "EURAmount",
    "number_to_user_rating",
    "number_to_distance_from_city_center",
    "number_to_eur_amount",
    "Hotel",
]
