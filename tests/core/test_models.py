"""
Tests for domain models and settings.
"""

import pytest
from pydantic import ValidationError

from ecotravel.config import EngineSettings, get_settings, settings
from ecotravel.errors import ConsentRequiredError, UnknownCategoryError
from ecotravel.models import CatalogItem, Coupon, RewardAccount, ServiceKind, UserCategory


class TestModels:
    """Test validation on the frozen value types."""

    def test_catalog_item_needs_place(self):
        with pytest.raises(ValidationError):
            CatalogItem(item_id=9, kind=ServiceKind.TRANSIT, name="Ghost Bus", base_price=10)

    def test_catalog_item_frozen(self):
        item = CatalogItem(item_id=9, kind="lodging", name="Inn", location="Kochi", base_price=900)
        with pytest.raises(ValidationError):
            item.base_price = 1

    def test_coupon_rejects_negative_cost(self):
        with pytest.raises(ValidationError):
            Coupon(coupon_id=1, title="Bad", calorie_cost=-1, points=0)

    def test_account_rejects_negative_points(self):
        with pytest.raises(ValidationError):
            RewardAccount(points=-1)

    def test_account_claimed_ids_coerced(self):
        account = RewardAccount(claimed_ids=[1, 2, 2])
        assert account.claimed_ids == frozenset({1, 2})
        assert account.has_claimed(2)


class TestErrors:
    """Test structured error payloads."""

    def test_unknown_category_dict(self):
        data = UnknownCategoryError("toddler").to_dict()
        assert data["error"] == "UnknownCategoryError"
        assert data["recoverable"] is False

    def test_consent_required(self):
        error = ConsentRequiredError(2)
        assert error.page_index == 2
        assert error.to_dict()["category"] == "flow"


class TestSettings:
    """Test EngineSettings defaults and env overrides."""

    def test_defaults(self):
        s = EngineSettings()
        assert s.env == "development"
        assert s.is_development is True
        assert s.currency_symbol == "₹"
        assert s.default_category == UserCategory.ADULT
        assert s.starting_points == 180
        assert s.calories_burned is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ECOTRAVEL_DEFAULT_CATEGORY", "senior")
        monkeypatch.setenv("ECOTRAVEL_CALORIES_BURNED", "99")
        s = get_settings()
        assert s.default_category == UserCategory.SENIOR
        assert s.calories_burned == 99

    def test_invalid_env(self, monkeypatch):
        monkeypatch.setenv("ECOTRAVEL_ENV", "qa")
        with pytest.raises(ValidationError):
            EngineSettings()

    def test_proxy(self):
        assert settings.log_level in ("DEBUG", "INFO", "WARNING", "ERROR")
