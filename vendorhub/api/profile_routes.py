from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.auth.dependencies import get_current_profile
from vendorhub.auth.routes import current_active_user
from vendorhub.crud import profile as profile_crud
from vendorhub.db import get_db
from vendorhub.models.profile import Profile
from vendorhub.models.user import User
from vendorhub.schemas.profile import ProfileCreate, ProfileRead, ProfileUpdate, VendorFeaturesRead

# Profile endpoints stay reachable while a vendor is pending or rejected
router = APIRouter(prefix="/api/profiles", tags=["profiles"])


@router.get("/me", response_model=ProfileRead)
async def read_my_profile(profile: Profile = Depends(get_current_profile)):
    return profile


@router.post("", response_model=ProfileRead, status_code=status.HTTP_201_CREATED)
async def create_profile(
    payload: ProfileCreate,
    user: User = Depends(current_active_user),
    db: AsyncSession = Depends(get_db),
):
    return await profile_crud.create_profile(db, user, payload)


@router.patch("/me", response_model=ProfileRead)
async def update_my_profile(
    updates: ProfileUpdate,
    profile: Profile = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db),
):
    return await profile_crud.update_profile(db, profile, updates)


@router.get("/me/features", response_model=VendorFeaturesRead)
async def read_my_features(
    profile: Profile = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db),
):
    return await profile_crud.get_features(db, profile.id)
