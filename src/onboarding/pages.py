"""
Onboarding Pages.

The introductory carousel shown before the main app. The last page carries
the data-sharing consent checkbox.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class OnboardingPage:
    """One page of the onboarding carousel."""
    page_id: int
    icon: str
    title: str
    description: str
    button_text: str = "Continue"
    is_last: bool = False


CONSENT_TEXT = (
    "I agree to share anonymized travel data to help improve "
    "Kerala's transportation system"
)

DEFAULT_PAGES: tuple[OnboardingPage, ...] = (
    OnboardingPage(
        page_id=1,
        icon="location",
        title="Track Your Journeys",
        description=(
            "Automatically detect and record your daily trips across Kerala "
            "to help improve transportation planning."
        ),
    ),
    OnboardingPage(
        page_id=2,
        icon="shield-checkmark",
        title="Your Privacy Matters",
        description=(
            "All data is anonymized and secure. We never store personal "
            "information or share individual travel patterns."
        ),
    ),
    OnboardingPage(
        page_id=3,
        icon="stats-chart",
        title="Building Better Transport",
        description=(
            "Your contributions help create data-driven insights for smarter "
            "public transportation and infrastructure planning."
        ),
        button_text="Get Started",
        is_last=True,
    ),
)
