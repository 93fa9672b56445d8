"""
EcoTravel - Domain models.

Plain value types shared by pricing and rewards. All models are frozen:
a change to an account produces a new RewardAccount rather than mutating
the one the UI is currently rendering.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UserCategory(str, Enum):
    """Rider classification used for category discounts."""
    CHILD = "child"
    STUDENT = "student"
    ADULT = "adult"
    SENIOR = "senior"


class ServiceKind(str, Enum):
    LODGING = "lodging"
    TRANSIT = "transit"


class CategoryProfile(BaseModel):
    """Discount and benefit list for one user category."""

    model_config = ConfigDict(frozen=True)

    discount_percent: int = Field(ge=0, le=100)
    benefits: tuple[str, ...] = ()


class CatalogItem(BaseModel):
    """
    A bookable government service.

    Lodging carries a location, transit carries a route. Prices are whole
    currency units (the source lists "₹2,500/night" as 2500).
    """

    model_config = ConfigDict(frozen=True)

    item_id: int
    kind: ServiceKind
    name: str
    location: str | None = None
    route: str | None = None
    base_price: int = Field(ge=0)
    rating: float | None = Field(default=None, ge=0, le=5)
    amenities: tuple[str, ...] = ()
    departure: str | None = None
    category_label: str = ""

    @model_validator(mode="after")
    def has_place(self) -> "CatalogItem":
        if not (self.location or self.route):
            raise ValueError("Catalog item needs a location or a route")
        return self

    @property
    def place_label(self) -> str:
        return self.location or self.route or ""


class Coupon(BaseModel):
    """A reward coupon gated on cumulative calories burned."""

    model_config = ConfigDict(frozen=True)

    coupon_id: int
    title: str
    calorie_cost: int = Field(ge=0)
    expires: str = ""
    points: int = Field(ge=0)
    claimed: bool = False


class RewardAccount(BaseModel):
    """
    Snapshot of a user's loyalty standing.

    `calories` comes from the activity tracker and is never spent by a claim.
    `claimed_ids` only grows.
    """

    model_config = ConfigDict(frozen=True)

    points: int = Field(default=0, ge=0)
    calories: int = Field(default=0, ge=0)
    claimed_ids: frozenset[int] = frozenset()

    def has_claimed(self, coupon_id: int) -> bool:
        return coupon_id in self.claimed_ids


class ActivitySnapshot(BaseModel):
    """Dashboard totals reported by the trip tracker."""

    model_config = ConfigDict(frozen=True)

    co2_saved_kg: float = Field(default=0.0, ge=0)
    calories: int = Field(default=0, ge=0)
    steps: int = Field(default=0, ge=0)
    money_saved: float = Field(default=0.0, ge=0)
