"""
Onboarding lifecycle of a vendor profile.

    pending ──► active
       │  ▲       ▲
       ▼  │       │
      rejected ───┘

Only admins move a profile between states; ``active`` has no outgoing
transitions and ``rejected`` can be corrected back to ``pending`` or
``active``.
"""
import logging
from typing import Dict, FrozenSet

from vendorhub.core.errors import ForbiddenError, InvalidTransitionError
from vendorhub.models.profile import OnboardingStatus, Profile

log = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: Dict[OnboardingStatus, FrozenSet[OnboardingStatus]] = {
    OnboardingStatus.PENDING: frozenset({OnboardingStatus.ACTIVE, OnboardingStatus.REJECTED}),
    OnboardingStatus.REJECTED: frozenset({OnboardingStatus.PENDING, OnboardingStatus.ACTIVE}),
    OnboardingStatus.ACTIVE: frozenset(),
}


def can_transition(current: OnboardingStatus, target: OnboardingStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[OnboardingStatus(current)]


def transition(profile: Profile, target: OnboardingStatus, *, actor_is_admin: bool, actor_id=None) -> Profile:
    """Moves ``profile`` to ``target`` in memory. Caller commits."""
    if not actor_is_admin:
        raise ForbiddenError("Admin access only")

    current = OnboardingStatus(profile.onboarding_status)
    target = OnboardingStatus(target)
    if not can_transition(current, target):
        raise InvalidTransitionError(
            f"Cannot move profile from {current.value} to {target.value}",
            field="status",
            details={"from": current.value, "to": target.value},
        )

    profile.onboarding_status = target
    log.info("onboarding: profile=%s %s -> %s by=%s", profile.id, current.value, target.value, actor_id)
    return profile
