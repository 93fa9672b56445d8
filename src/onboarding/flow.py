"""
Onboarding Flow.

Linear page sequence with a consent gate on the last page:

    Page(0) -> Page(1) -> ... -> Page(N-1) --[consent]--> Completed

- advance: next page, or Completed from the last page once consent is given
- go_back: previous page, floored at 0
- set_consent: legal on any page; only the last page checks it

Completed is absorbing: every operation returns the state unchanged.
States are immutable; each operation returns a new OnboardingState.
"""

import logging
from dataclasses import asdict, dataclass, replace
from typing import Sequence

from ecotravel.errors import ConsentRequiredError
from onboarding.pages import DEFAULT_PAGES, OnboardingPage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OnboardingState:
    """Where the user is in the carousel."""
    index: int = 0
    consent: bool = False
    completed: bool = False

    def to_dict(self) -> dict:
        """Serialize state to dict for session storage."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "OnboardingState":
        """Deserialize state. Flags must be real bools or "true"/"false"."""
        return cls(
            index=int(data.get("index", 0)),
            consent=_parse_flag("consent", data.get("consent", False)),
            completed=_parse_flag("completed", data.get("completed", False)),
        )


def _parse_flag(name: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"Invalid {name} flag: {value!r}")


class OnboardingFlow:
    """Sequencer over an ordered set of onboarding pages."""

    def __init__(self, pages: Sequence[OnboardingPage] = DEFAULT_PAGES) -> None:
        if not pages:
            raise ValueError("Onboarding flow needs at least one page")
        self.pages = tuple(pages)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def last_index(self) -> int:
        return len(self.pages) - 1

    def start(self) -> OnboardingState:
        return OnboardingState()

    def _check(self, state: OnboardingState) -> None:
        if not 0 <= state.index <= self.last_index:
            raise ValueError(
                f"Page index {state.index} out of range for {self.page_count} pages"
            )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def current_page(self, state: OnboardingState) -> OnboardingPage:
        self._check(state)
        return self.pages[state.index]

    def is_last(self, state: OnboardingState) -> bool:
        self._check(state)
        return state.index == self.last_index

    def can_advance(self, state: OnboardingState) -> bool:
        """False only on the last page while consent is unchecked."""
        if state.completed:
            return False
        return not self.is_last(state) or state.consent

    def progress(self, state: OnboardingState) -> list[bool]:
        """Page indicator dots; the active page is True."""
        self._check(state)
        return [i == state.index for i in range(self.page_count)]

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def advance(self, state: OnboardingState) -> OnboardingState:
        """
        Move forward one page, or complete the flow from the last page.

        Raises:
            ConsentRequiredError: on the last page without consent
        """
        if state.completed:
            return state
        self._check(state)

        if state.index < self.last_index:
            return replace(state, index=state.index + 1)

        if not state.consent:
            logger.info("Onboarding completion blocked: consent not given")
            raise ConsentRequiredError(state.index)

        logger.info("Onboarding completed")
        return replace(state, completed=True)

    def go_back(self, state: OnboardingState) -> OnboardingState:
        if state.completed:
            return state
        self._check(state)
        return replace(state, index=max(0, state.index - 1))

    def set_consent(self, state: OnboardingState, value: bool) -> OnboardingState:
        if state.completed:
            return state
        self._check(state)
        return replace(state, consent=value)
