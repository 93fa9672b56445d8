"""
Pytest configuration and fixtures for EcoTravel tests.
"""

import os

import pytest

# Set test environment before importing ecotravel modules
os.environ["ECOTRAVEL_ENV"] = "development"
os.environ.pop("ECOTRAVEL_DEFAULT_CATEGORY", None)

from ecotravel.config import get_settings
from ecotravel.models import Coupon, RewardAccount


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def metro_coupon():
    return Coupon(coupon_id=1, title="30% Off Metro Pass", calorie_cost=250, expires="Dec 31", points=50)


@pytest.fixture
def walking_coupon():
    return Coupon(coupon_id=4, title="Walking Tour Voucher", calorie_cost=400, expires="Jan 10", points=100)


@pytest.fixture
def account():
    """Dashboard account: 180 pts, 1250 calories, bike rental already claimed."""
    return RewardAccount(points=180, calories=1250, claimed_ids=frozenset({3}))


@pytest.fixture
def low_calorie_account():
    return RewardAccount(points=10, calories=300)
