"""
EcoTravel - Category pricing.

Discounts depend only on the rider category:
- child:   50% off
- student: 30% off
- adult:   no discount
- senior:  40% off

Rounding: the discount amount is truncated, so the customer pays
`base - floor(base * pct / 100)`. A price of 451 for a senior is 271, not 270.
"""

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ecotravel.errors import UnknownCategoryError
from ecotravel.models import CatalogItem, CategoryProfile, UserCategory

logger = logging.getLogger(__name__)


# =============================================================================
# Category Profiles
# =============================================================================

CATEGORY_PROFILES: Mapping[UserCategory, CategoryProfile] = MappingProxyType({
    UserCategory.CHILD: CategoryProfile(
        discount_percent=50, benefits=("Free meals", "Priority seating")
    ),
    UserCategory.STUDENT: CategoryProfile(
        discount_percent=30, benefits=("Educational tours", "Group discounts")
    ),
    UserCategory.ADULT: CategoryProfile(
        discount_percent=0, benefits=("Standard booking", "Loyalty points")
    ),
    UserCategory.SENIOR: CategoryProfile(
        discount_percent=40, benefits=("Priority boarding", "Medical assistance")
    ),
})


def resolve_category(category: UserCategory | str) -> UserCategory:
    """Accept an enum member or its string value; reject everything else."""
    if isinstance(category, UserCategory):
        return category
    try:
        return UserCategory(category)
    except ValueError:
        logger.error(f"Unknown user category reached pricing: {category!r}")
        raise UnknownCategoryError(category) from None


def get_profile(category: UserCategory | str) -> CategoryProfile:
    return CATEGORY_PROFILES[resolve_category(category)]


def discount_percent(category: UserCategory | str) -> int:
    return get_profile(category).discount_percent


def benefits_for(category: UserCategory | str) -> list[str]:
    return list(get_profile(category).benefits)


# =============================================================================
# Price Computation
# =============================================================================

def discounted_price(base_price: int, category: UserCategory | str) -> int:
    """
    Price a listing for a rider category.

    Args:
        base_price: Listed price in whole currency units (>= 0)
        category: Rider category

    Returns:
        The discounted price, never above base_price.
    """
    if isinstance(base_price, bool) or not isinstance(base_price, int):
        raise ValueError(f"Price must be an integer amount, got {base_price!r}")
    if base_price < 0:
        raise ValueError(f"Price must be non-negative, got {base_price}")

    pct = discount_percent(category)
    return base_price - (base_price * pct) // 100


@dataclass(frozen=True)
class PriceQuote:
    """What a service card or booking modal shows for one item."""
    item_id: int
    category: UserCategory
    original_price: int
    final_price: int
    discount_percent: int

    @property
    def show_original(self) -> bool:
        """Struck-through original price is only shown when discounted."""
        return self.discount_percent > 0

    @property
    def savings(self) -> int:
        return self.original_price - self.final_price


def quote(item: CatalogItem, category: UserCategory | str) -> PriceQuote:
    """Build the price quote for a catalog item."""
    resolved = resolve_category(category)
    return PriceQuote(
        item_id=item.item_id,
        category=resolved,
        original_price=item.base_price,
        final_price=discounted_price(item.base_price, resolved),
        discount_percent=discount_percent(resolved),
    )


# =============================================================================
# Price Labels
# =============================================================================

_NON_DIGITS = re.compile(r"[^\d]")


def parse_price_label(label: str) -> int:
    """
    Extract the amount from a listing label.

    "₹2,500/night" -> 2500, "₹450" -> 450.
    """
    digits = _NON_DIGITS.sub("", label)
    if not digits:
        raise ValueError(f"No amount in price label: {label!r}")
    return int(digits)


def format_price(amount: int, currency_symbol: str = "₹") -> str:
    """Render an amount with thousands separators, e.g. "₹2,500"."""
    return f"{currency_symbol}{amount:,}"
