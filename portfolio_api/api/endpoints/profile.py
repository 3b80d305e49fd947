# portfolio_api/api/endpoints/profile.py
from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.api.deps import get_storage
from portfolio_api.core.logging import logger
from portfolio_api.middleware.auth import AdminGuardRoute, require_admin
from portfolio_api.schemas.profile import Profile as ProfileSchema, ProfileUpdate
from portfolio_api.services.storage import PortfolioStorage

router = APIRouter(route_class=AdminGuardRoute)


@router.get("", response_model=ProfileSchema)
def get_profile(storage: PortfolioStorage = Depends(get_storage)):
    """
    Get the site owner's profile (defaults until it is first saved)
    """
    try:
        return storage.get_profile()
    except Exception as e:
        logger.exception(f"Error retrieving profile: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch profile"
        )


@router.patch("", response_model=ProfileSchema, dependencies=[Depends(require_admin)])
def update_profile(
    profile_in: ProfileUpdate,
    storage: PortfolioStorage = Depends(get_storage),
):
    """
    Update some fields of the profile
    """
    try:
        return storage.update_profile(profile_in.model_dump(exclude_unset=True))
    except Exception as e:
        logger.exception(f"Profile update error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update profile"
        )
