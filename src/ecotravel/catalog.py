"""
EcoTravel - Static catalog data.

The services, coupons, and activity totals shown by the app. These are
fixed listings; the presentation layer reads them and passes individual
items into pricing and rewards.
"""

from ecotravel.models import ActivitySnapshot, CatalogItem, Coupon, ServiceKind


# =============================================================================
# Government Services
# =============================================================================

SERVICES: tuple[CatalogItem, ...] = (
    CatalogItem(
        item_id=1,
        kind=ServiceKind.LODGING,
        name="ITDC Hotel Ashok",
        location="Chankyapuri",
        base_price=2500,  # ₹2,500/night
        rating=4.2,
        amenities=("WiFi", "Restaurant", "Parking"),
        category_label="Premium",
    ),
    CatalogItem(
        item_id=3,
        kind=ServiceKind.TRANSIT,
        name="DTC Volvo Service",
        route="Delhi - Agra",
        base_price=450,
        departure="06:30 AM",
        category_label="Express",
    ),
)


# =============================================================================
# Reward Coupons
# =============================================================================

COUPONS: tuple[Coupon, ...] = (
    Coupon(coupon_id=1, title="30% Off Metro Pass", calorie_cost=250, expires="Dec 31", points=50),
    Coupon(coupon_id=2, title="Free Bus Day Pass", calorie_cost=180, expires="Dec 28", points=30),
    Coupon(coupon_id=3, title="Bike Rental Discount", calorie_cost=320, expires="Jan 5", points=70, claimed=True),
    Coupon(coupon_id=4, title="Walking Tour Voucher", calorie_cost=400, expires="Jan 10", points=100),
)


# =============================================================================
# Dashboard Totals
# =============================================================================

ACTIVITY = ActivitySnapshot(
    co2_saved_kg=240.5,
    calories=1250,
    steps=8450,
    money_saved=120.75,
)


def get_service(item_id: int) -> CatalogItem:
    """Look up a service by id. Raises KeyError if it is not listed."""
    for item in SERVICES:
        if item.item_id == item_id:
            return item
    raise KeyError(f"No service with id {item_id}")


def get_coupon(coupon_id: int) -> Coupon:
    """Look up a coupon by id. Raises KeyError if it is not listed."""
    for coupon in COUPONS:
        if coupon.coupon_id == coupon_id:
            return coupon
    raise KeyError(f"No coupon with id {coupon_id}")
