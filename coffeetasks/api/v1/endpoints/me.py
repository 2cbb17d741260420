"""Profile bootstrap: who is signed in and where the admin SPA should land."""

from typing import Annotated

from fastapi import APIRouter, Depends

from coffeetasks.api.v1.dependencies import get_current_profile
from coffeetasks.application.dtos.user import UserProfileResult
from coffeetasks.application.services.profile_service import home_path_for
from coffeetasks.schemas.account import GeoPointSchema, ProfileResponse

router = APIRouter()


def _to_response(profile: UserProfileResult) -> ProfileResponse:
    location = profile.coffeeshop_location
    return ProfileResponse(
        id=profile.id,
        name=profile.name,
        role=profile.role,
        login=profile.login,
        coffeeshop_id=profile.coffeeshop_id,
        coffeeshop_location=(
            GeoPointSchema(latitude=location.latitude, longitude=location.longitude)
            if location
            else None
        ),
        degraded=profile.degraded,
        home=home_path_for(profile.role),
    )


@router.get("", response_model=ProfileResponse)
async def get_me(
    profile: Annotated[UserProfileResult, Depends(get_current_profile)],
) -> ProfileResponse:
    """Return the caller's stored profile.

    A profile that could not be read comes back degraded with the lowest
    role, so the client routes to the least privileged screen.
    """
    return _to_response(profile)
