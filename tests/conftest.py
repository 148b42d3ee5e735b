"""
Pytest configuration for the hotel filter demo.

Provides fixtures for:
- The sample hotel catalog
- Settings with test-specific overrides
- A CLI runner for end-to-end checks
"""

from __future__ import annotations

from typing import Generator, Tuple

import pytest
from typer.testing import CliRunner

from hotel_filters.config import Settings, get_settings
from hotel_filters.domain.catalog import sample_hotels
from hotel_filters.domain.models import Hotel, StarRating


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(app_env="test", log_level="DEBUG", log_json=False)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    """Make each test read environment overrides afresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def hotels() -> Tuple[Hotel, ...]:
    """The three sample hotels in display order."""
    return sample_hotels()


@pytest.fixture
def make_hotel():
    """Factory for ad-hoc hotels with sensible defaults."""

    def _make(**overrides) -> Hotel:
        fields = {
            "name": "Probe",
            "star_rating": StarRating.THREE,
            "user_rating": 8.0,
            "distance_from_city_center": 1.0,
            "price_per_room": 50,
            "reception_24_7": False,
        }
        fields.update(overrides)
        return Hotel(**fields)

    return _make


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
