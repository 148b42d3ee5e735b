from __future__ import annotations

import pytest
from pydantic import ValidationError

from hotel_filters.domain.models import (
    DistanceFromCityCenter,
    EURAmount,
    StarRating,
    UserRating,
    number_to_distance_from_city_center,
    number_to_eur_amount,
    number_to_user_rating,
)
from hotel_filters.exceptions import InvalidQuantityError


class TestUserRating:
    @pytest.mark.parametrize("value", [0, 0.0, 6.9, 10, 10.0])
    def test_accepts_values_in_range(self, value):
        assert float(number_to_user_rating(value)) == float(value)

    @pytest.mark.parametrize("value", [10.0001, -0.0001, 11, -1, float("nan")])
    def test_rejects_values_out_of_range(self, value):
        with pytest.raises(InvalidQuantityError, match="Invalid UserRating value"):
            UserRating(value)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            number_to_user_rating(42)

    def test_error_carries_quantity_and_value(self):
        with pytest.raises(InvalidQuantityError) as excinfo:
            UserRating(10.5)
        assert excinfo.value.quantity == "UserRating"
        assert excinfo.value.value == 10.5


class TestNonNegativeQuantities:
    @pytest.mark.parametrize("factory", [number_to_distance_from_city_center, number_to_eur_amount])
    def test_zero_is_valid(self, factory):
        assert factory(0) == 0

    @pytest.mark.parametrize(
        "factory, name",
        [
            (number_to_distance_from_city_center, "DistanceFromCityCenter"),
            (number_to_eur_amount, "EURAmount"),
        ],
    )
    def test_negative_is_rejected(self, factory, name):
        with pytest.raises(InvalidQuantityError, match=f"Invalid {name} value"):
            factory(-0.01)

    @pytest.mark.parametrize("factory", [number_to_distance_from_city_center, number_to_eur_amount])
    def test_nan_is_rejected(self, factory):
        with pytest.raises(InvalidQuantityError):
            factory(float("nan"))

    def test_wrappers_are_distinct_types(self):
        price = EURAmount(5)
        distance = DistanceFromCityCenter(5)
        assert isinstance(price, float)
        assert not isinstance(price, DistanceFromCityCenter)
        assert type(distance) is DistanceFromCityCenter
        assert repr(price) == "EURAmount(5.0)"

    def test_wrappers_compare_as_numbers(self):
        assert EURAmount(20) < EURAmount(100)
        assert EURAmount(100) == 100


class TestStarRating:
    def test_levels_are_ordered_one_to_five(self):
        assert [level.value for level in StarRating] == [1, 2, 3, 4, 5]
        assert StarRating.ONE < StarRating.FIVE
        assert StarRating.FIVE >= StarRating.FOUR
        assert sorted([StarRating.THREE, StarRating.ONE]) == [StarRating.ONE, StarRating.THREE]

    def test_members_never_equal_plain_values(self):
        assert StarRating.ONE != 1
        assert StarRating.ONE != True  # noqa: E712
        with pytest.raises(TypeError):
            StarRating.ONE < 2


class TestHotel:
    def test_raw_numbers_are_wrapped(self, make_hotel):
        hotel = make_hotel(user_rating=7.5, distance_from_city_center=2, price_per_room=80)
        assert isinstance(hotel.user_rating, UserRating)
        assert isinstance(hotel.distance_from_city_center, DistanceFromCityCenter)
        assert isinstance(hotel.price_per_room, EURAmount)
        assert hotel.price_per_room == 80

    def test_accepts_already_wrapped_values(self, make_hotel):
        hotel = make_hotel(price_per_room=EURAmount(0))
        assert hotel.price_per_room == 0

    @pytest.mark.parametrize(
        "field, value",
        [
            ("user_rating", 10.0001),
            ("user_rating", -0.0001),
            ("distance_from_city_center", -1),
            ("price_per_room", -5),
            ("user_rating", float("nan")),
            ("price_per_room", float("nan")),
            ("distance_from_city_center", float("nan")),
        ],
    )
    def test_invalid_quantities_fail_construction(self, make_hotel, field, value):
        with pytest.raises(ValidationError):
            make_hotel(**{field: value})

    def test_unknown_star_rating_fails_construction(self, make_hotel):
        with pytest.raises(ValidationError):
            make_hotel(star_rating=6)

    def test_is_immutable(self, make_hotel):
        hotel = make_hotel()
        with pytest.raises(ValidationError):
            hotel.name = "Renamed"


def test_sample_hotels_in_display_order(hotels):
    assert [hotel.name for hotel in hotels] == ["Hostel 1", "Test 1", "Test 5🌟"]
    assert [hotel.star_rating for hotel in hotels] == [StarRating.ONE, StarRating.THREE, StarRating.FIVE]
    assert [hotel.price_per_room for hotel in hotels] == [20, 90, 260]
    assert [hotel.reception_24_7 for hotel in hotels] == [True, False, True]
