"""
EcoTravel - Reward coupons and loyalty points.

Coupons are unlocked by cumulative calories burned and grant loyalty points
when claimed. Calories work as a threshold, not a balance: claiming a coupon
never spends them.

Per-coupon lifecycle (per account):
    UNCLAIMED --claim--> CLAIMED (terminal)

The module-level functions are pure: they take a RewardAccount and return a
new one. RewardLedger wraps them for callers that hold a single current
account and may dispatch overlapping claims (e.g. a double tap).
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from ecotravel.errors import AlreadyClaimedError, InsufficientCaloriesError
from ecotravel.models import Coupon, RewardAccount

logger = logging.getLogger(__name__)


class CouponStatus(Enum):
    """What the claim button shows."""
    CLAIMED = "claimed"
    AVAILABLE = "available"
    LOCKED = "locked"  # Not enough calories yet


# =============================================================================
# Pure Operations
# =============================================================================

def can_claim(coupon: Coupon, account: RewardAccount) -> bool:
    """
    True if the coupon is unclaimed and the calorie gate is met.

    Only the account decides "claimed"; the coupon's catalog flag is ignored
    here and matters only when seed_account builds the starting account.
    """
    if account.has_claimed(coupon.coupon_id):
        return False
    return account.calories >= coupon.calorie_cost


def claim(coupon: Coupon, account: RewardAccount) -> RewardAccount:
    """
    Claim a coupon for an account.

    Returns:
        A new account with the coupon recorded and its points added.
        Calories are unchanged.

    Raises:
        AlreadyClaimedError: the coupon is already in claimed_ids
        InsufficientCaloriesError: calories < calorie_cost (carries shortfall)
    """
    if account.has_claimed(coupon.coupon_id):
        logger.info(f"Coupon {coupon.coupon_id} already claimed")
        raise AlreadyClaimedError(coupon.coupon_id)

    if account.calories < coupon.calorie_cost:
        error = InsufficientCaloriesError(
            coupon.coupon_id, coupon.calorie_cost, account.calories
        )
        logger.info(
            f"Coupon {coupon.coupon_id} locked: short by {error.shortfall} calories"
        )
        raise error

    updated = account.model_copy(update={
        "points": account.points + coupon.points,
        "claimed_ids": account.claimed_ids | {coupon.coupon_id},
    })
    logger.info(f"Coupon {coupon.coupon_id} claimed: +{coupon.points} pts")
    return updated


def grant_points(account: RewardAccount, amount: int) -> RewardAccount:
    """Explicit external grant (e.g. a promotion). Never negative."""
    if amount < 0:
        raise ValueError(f"Cannot grant negative points: {amount}")
    return account.model_copy(update={"points": account.points + amount})


def coupon_status(coupon: Coupon, account: RewardAccount) -> CouponStatus:
    if account.has_claimed(coupon.coupon_id):
        return CouponStatus.CLAIMED
    if account.calories >= coupon.calorie_cost:
        return CouponStatus.AVAILABLE
    return CouponStatus.LOCKED


def claim_button_label(coupon: Coupon, account: RewardAccount) -> str:
    status = coupon_status(coupon, account)
    if status == CouponStatus.CLAIMED:
        return "Claimed"
    if status == CouponStatus.AVAILABLE:
        return f"+{coupon.points} pts"
    return "Locked"


def coupon_view(coupon: Coupon, account: RewardAccount) -> Coupon:
    """Copy of the coupon whose claimed flag matches the account."""
    claimed = account.has_claimed(coupon.coupon_id)
    if coupon.claimed == claimed:
        return coupon
    return coupon.model_copy(update={"claimed": claimed})


def seed_account(
    coupons: Iterable[Coupon],
    points: int = 0,
    calories: int = 0,
) -> RewardAccount:
    """Initial account; coupons listed as already claimed start in claimed_ids."""
    return RewardAccount(
        points=points,
        calories=calories,
        claimed_ids=frozenset(c.coupon_id for c in coupons if c.claimed),
    )


# =============================================================================
# Ledger
# =============================================================================

@dataclass(frozen=True)
class ClaimReceipt:
    """Result of a successful claim, for the confirmation alert."""
    coupon_id: int
    points_awarded: int
    account: RewardAccount

    @property
    def message(self) -> str:
        return f"You earned {self.points_awarded} points."


class RewardLedger:
    """
    Holds the current RewardAccount and serializes claims against it.

    Check and update happen under one lock, so when two claims for the same
    coupon race, the second sees the first's claimed_ids and fails with
    AlreadyClaimedError instead of adding the points twice.
    """

    def __init__(self, account: RewardAccount | None = None) -> None:
        self._account = account if account is not None else RewardAccount()
        self._lock = threading.Lock()

    @property
    def account(self) -> RewardAccount:
        return self._account

    def can_claim(self, coupon: Coupon) -> bool:
        return can_claim(coupon, self._account)

    def status(self, coupon: Coupon) -> CouponStatus:
        return coupon_status(coupon, self._account)

    def claim(self, coupon: Coupon) -> ClaimReceipt:
        with self._lock:
            self._account = claim(coupon, self._account)
            return ClaimReceipt(
                coupon_id=coupon.coupon_id,
                points_awarded=coupon.points,
                account=self._account,
            )

    def grant_points(self, amount: int) -> RewardAccount:
        with self._lock:
            self._account = grant_points(self._account, amount)
            return self._account

    def update_calories(self, calories: int) -> RewardAccount:
        """Replace the calorie snapshot with a fresh tracker reading."""
        with self._lock:
            self._account = RewardAccount.model_validate(
                {**self._account.model_dump(), "calories": calories}
            )
            return self._account
