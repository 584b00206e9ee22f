import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.core.config import settings
from vendorhub.core.errors import NotFoundError, ValidationError
from vendorhub.models.profile import OnboardingStatus, Profile
from vendorhub.models.user import User
from vendorhub.models.vendor_features import VendorFeatures
from vendorhub.schemas.profile import ProfileCreate, ProfileUpdate, VendorFeaturesUpdate
from vendorhub.services import onboarding

log = logging.getLogger(__name__)


def _is_seed_admin(user: User) -> bool:
    return (user.email or "").lower() in settings.admin_email_set


async def get_by_user(db: AsyncSession, user_id) -> Optional[Profile]:
    result = await db.execute(select(Profile).where(Profile.user_id == user_id))
    return result.scalar_one_or_none()


async def get_by_email(db: AsyncSession, email: str) -> Optional[Profile]:
    result = await db.execute(
        select(Profile).join(User, User.id == Profile.user_id).where(func.lower(User.email) == email.lower())
    )
    return result.scalar_one_or_none()


def _new_profile(user: User, **fields) -> Profile:
    profile = Profile(user_id=user.id, **fields)
    if _is_seed_admin(user):
        profile.is_admin = True
        profile.onboarding_status = OnboardingStatus.ACTIVE
    else:
        profile.is_admin = False
        profile.onboarding_status = OnboardingStatus.PENDING
    return profile


async def get_or_create_for_user(db: AsyncSession, user: User) -> Profile:
    """Maps an authenticated subject to its single profile, creating it on first sight."""
    user_id = user.id
    profile = await get_by_user(db, user_id)
    if profile:
        return profile

    placeholder = (user.email or "vendor").split("@")[0]
    profile = _new_profile(user, business_name=placeholder, owner_name=placeholder, email=user.email)
    db.add(profile)
    try:
        await db.flush()
        db.add(VendorFeatures(vendor_id=profile.id))
        await db.commit()
    except IntegrityError:
        # Concurrent first request for the same subject won the insert
        await db.rollback()
        existing = await get_by_user(db, user_id)
        if existing:
            return existing
        raise
    await db.refresh(profile)
    log.info("profile created on first sight: profile=%s user=%s status=%s", profile.id, user_id, profile.onboarding_status.value)
    return profile


async def create_profile(db: AsyncSession, user: User, payload: ProfileCreate) -> Profile:
    if await get_by_user(db, user.id):
        raise ValidationError("Profile already exists for this account", field="userId")

    profile = _new_profile(user, **payload.model_dump())
    db.add(profile)
    await db.flush()
    db.add(VendorFeatures(vendor_id=profile.id))
    await db.commit()
    await db.refresh(profile)
    log.info("profile created: profile=%s user=%s", profile.id, user.id)
    return profile


async def update_profile(db: AsyncSession, profile: Profile, updates: ProfileUpdate) -> Profile:
    changes = updates.model_dump(exclude_unset=True)
    columns = Profile.__table__.c
    for key, value in changes.items():
        if value is None and not columns[key].nullable:
            raise ValidationError(f"{key} cannot be null", field=key)
    for key, value in changes.items():
        setattr(profile, key, value)
    await db.commit()
    await db.refresh(profile)
    return profile


# ---------- Feature flags ----------
async def ensure_features(db: AsyncSession, vendor_id: int) -> VendorFeatures:
    """Loads the vendor's toggles, adding a default row to the open transaction if none exists. Never commits."""
    result = await db.execute(select(VendorFeatures).where(VendorFeatures.vendor_id == vendor_id))
    features = result.scalar_one_or_none()
    if features is None:
        features = VendorFeatures(vendor_id=vendor_id)
        db.add(features)
        await db.flush()
    return features


async def get_features(db: AsyncSession, vendor_id: int) -> VendorFeatures:
    features = await ensure_features(db, vendor_id)
    await db.commit()
    await db.refresh(features)
    return features


async def update_features(db: AsyncSession, vendor_id: int, updates: VendorFeaturesUpdate, admin_id: int) -> VendorFeatures:
    features = await ensure_features(db, vendor_id)
    changes = updates.model_dump(exclude_unset=True, exclude_none=True)
    for key, value in changes.items():
        setattr(features, key, value)
    features.updated_by = admin_id
    await db.commit()
    await db.refresh(features)
    log.info("features updated: vendor=%s by=%s changes=%s", vendor_id, admin_id, changes)
    return features


# ---------- Admin ----------
async def list_profiles(db: AsyncSession, status: Optional[OnboardingStatus] = None) -> List[Profile]:
    query = select(Profile).order_by(Profile.id)
    if status is not None:
        query = query.where(Profile.onboarding_status == status)
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_profile(db: AsyncSession, profile_id: int) -> Profile:
    profile = await db.get(Profile, profile_id)
    if not profile:
        raise NotFoundError("Profile not found")
    return profile


async def change_status(db: AsyncSession, profile_id: int, target: OnboardingStatus, actor) -> Profile:
    profile = await get_profile(db, profile_id)
    onboarding.transition(profile, target, actor_is_admin=actor.is_admin, actor_id=actor.vendor_id)
    await db.commit()
    await db.refresh(profile)
    return profile


async def count_by_status(db: AsyncSession) -> dict:
    result = await db.execute(select(Profile.onboarding_status, func.count()).group_by(Profile.onboarding_status))
    counts = {s.value: 0 for s in OnboardingStatus}
    for status, count in result.all():
        counts[OnboardingStatus(status).value] = count
    return counts
