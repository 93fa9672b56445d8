"""
Tests for category pricing.
"""

import pytest

from ecotravel.catalog import get_service
from ecotravel.errors import UnknownCategoryError
from ecotravel.models import UserCategory
from ecotravel.pricing import (
    CATEGORY_PROFILES,
    benefits_for,
    discount_percent,
    discounted_price,
    format_price,
    parse_price_label,
    quote,
)


class TestCategoryProfiles:
    """Test the static category table."""

    def test_every_category_has_profile(self):
        for category in UserCategory:
            assert category in CATEGORY_PROFILES

    def test_discounts(self):
        assert discount_percent(UserCategory.CHILD) == 50
        assert discount_percent(UserCategory.STUDENT) == 30
        assert discount_percent(UserCategory.ADULT) == 0
        assert discount_percent(UserCategory.SENIOR) == 40

    def test_benefits_keep_order(self):
        assert benefits_for("senior") == ["Priority boarding", "Medical assistance"]

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            CATEGORY_PROFILES[UserCategory.ADULT] = CATEGORY_PROFILES[UserCategory.CHILD]


class TestDiscountedPrice:
    """Test discounted_price rounding and edge cases."""

    def test_child_even_amount(self):
        assert discounted_price(2500, UserCategory.CHILD) == 1250

    def test_senior_odd_amount_truncates_discount(self):
        # 451 * 40 / 100 = 180.4 -> 180 off
        assert discounted_price(451, UserCategory.SENIOR) == 271

    def test_student(self):
        assert discounted_price(450, "student") == 315

    def test_adult_pays_full_price(self):
        assert discounted_price(451, UserCategory.ADULT) == 451

    def test_zero_price(self):
        for category in UserCategory:
            assert discounted_price(0, category) == 0

    def test_string_category(self):
        assert discounted_price(2500, "child") == 1250

    def test_never_above_base_price(self):
        for base in (0, 1, 7, 99, 451, 2500, 10_001):
            for category in UserCategory:
                result = discounted_price(base, category)
                assert result <= base
                if base > 0 and discount_percent(category) > 0 and result == base:
                    # Only tiny amounts can round back to the base price
                    assert base * discount_percent(category) < 100

    def test_unknown_category(self):
        with pytest.raises(UnknownCategoryError) as exc_info:
            discounted_price(100, "pensioner")
        assert exc_info.value.recoverable is False
        assert exc_info.value.category_value == "pensioner"

    def test_negative_price(self):
        with pytest.raises(ValueError):
            discounted_price(-1, UserCategory.ADULT)

    def test_non_integer_price(self):
        with pytest.raises(ValueError):
            discounted_price(12.5, UserCategory.ADULT)


class TestQuote:
    """Test price quotes for catalog items."""

    def test_hotel_for_child(self):
        q = quote(get_service(1), UserCategory.CHILD)
        assert q.original_price == 2500
        assert q.final_price == 1250
        assert q.savings == 1250
        assert q.show_original is True

    def test_no_struck_price_for_adult(self):
        q = quote(get_service(3), "adult")
        assert q.final_price == q.original_price == 450
        assert q.show_original is False
        assert q.category == UserCategory.ADULT


class TestPriceLabels:
    """Test parsing and formatting of price labels."""

    def test_parse_nightly_rate(self):
        assert parse_price_label("₹2,500/night") == 2500

    def test_parse_plain(self):
        assert parse_price_label("₹450") == 450

    def test_parse_without_digits(self):
        with pytest.raises(ValueError):
            parse_price_label("Free")

    def test_format(self):
        assert format_price(2500) == "₹2,500"
        assert format_price(271, "$") == "$271"
