"""
EcoTravel Onboarding.

Introductory carousel shown on first launch:
1. Track Your Journeys
2. Your Privacy Matters
3. Building Better Transport (consent checkbox gates "Get Started")

When the flow completes, the caller hands control to the main app tabs.
"""

from .flow import OnboardingFlow, OnboardingState
from .pages import CONSENT_TEXT, DEFAULT_PAGES, OnboardingPage

__all__ = [
    "OnboardingFlow",
    "OnboardingState",
    "OnboardingPage",
    "DEFAULT_PAGES",
    "CONSENT_TEXT",
]
