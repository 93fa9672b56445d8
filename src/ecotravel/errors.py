"""
EcoTravel - Engine errors.

Every failure the engine reports is an EngineError subclass. The presentation
layer decides whether to show a message, disable a control, or ignore it.

- UnknownCategoryError: a caller passed a user category outside the enum.
  This is a caller bug, so it is not recoverable.
- AlreadyClaimedError / InsufficientCaloriesError: ordinary claim outcomes.
- ConsentRequiredError: the onboarding consent gate is still closed.
"""

from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    CONFIGURATION = "configuration"
    CLAIM = "claim"
    FLOW = "flow"


class EngineError(Exception):
    """Base class for errors returned to the presentation layer."""

    category: ErrorCategory = ErrorCategory.CONFIGURATION
    recoverable: bool = True

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": type(self).__name__,
            "category": self.category.value,
            "message": self.message,
            "recoverable": self.recoverable,
        }


class UnknownCategoryError(EngineError):
    """A user category that is not child, student, adult, or senior."""

    recoverable = False

    def __init__(self, category: object) -> None:
        super().__init__(f"Unknown user category: {category!r}")
        self.category_value = category


class ClaimError(EngineError):
    """A coupon claim was refused."""

    category = ErrorCategory.CLAIM

    def __init__(self, coupon_id: int, message: str) -> None:
        super().__init__(message)
        self.coupon_id = coupon_id


class AlreadyClaimedError(ClaimError):
    def __init__(self, coupon_id: int) -> None:
        super().__init__(coupon_id, f"Coupon {coupon_id} has already been claimed.")


class InsufficientCaloriesError(ClaimError):
    """
    The account's calorie figure is below the coupon's requirement.

    `shortfall` is the exact deficit so the UI can say how many more
    calories are needed.
    """

    def __init__(self, coupon_id: int, calorie_cost: int, calories: int) -> None:
        super().__init__(
            coupon_id,
            f"You need {calorie_cost} calories to claim this reward.",
        )
        self.calorie_cost = calorie_cost
        self.calories = calories
        self.shortfall = calorie_cost - calories

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["shortfall"] = self.shortfall
        return data


class ConsentRequiredError(EngineError):
    category = ErrorCategory.FLOW

    def __init__(self, page_index: int) -> None:
        super().__init__("Agree to share anonymized travel data to continue.")
        self.page_index = page_index
