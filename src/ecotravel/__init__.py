"""
EcoTravel - Loyalty & pricing engine for the EcoTravel mobility app.

Areas:
- Pricing: category discounts on government lodging and transit services
- Rewards: calorie-gated coupons and loyalty points
- Onboarding: see the sibling `onboarding` package
"""

__version__ = "1.0.0"
