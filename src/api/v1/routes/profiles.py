"""Profile API routes."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import (
    ErrorResponse,
    MessageErrorResponse,
    MessageResponse,
    ProfileNotFoundResponse,
)
from api.v1.schemas.profile import ProfileMutationResponse, ProfileResponse, ProfileWrite
from core.exceptions import ProfileMissingError
from core.rate_limit import limiter
from domain.entities.profile import UNASSIGNED_PROFILE_ID, Profile
from domain.services.profile_service import ProfileService

UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Missing or invalid token"}}
NOT_FOUND = {404: {"model": ProfileNotFoundResponse, "description": "Profile not found"}}

# The collection and the single resource are mounted on different prefixes.
profiles_router = APIRouter(prefix="/profiles", tags=["profile"])
profile_router = APIRouter(prefix="/profile", tags=["profile"])

OptionalProfileBody = Annotated[ProfileWrite | None, Body()]


def _to_response(profile: Profile) -> ProfileResponse:
    return ProfileResponse(
        id=profile.id,
        email=profile.email,
        name=profile.name,
        avatar_url=profile.avatar_url,
    )


def _to_entity(body: ProfileWrite) -> Profile:
    return Profile(
        id=body.id or UNASSIGNED_PROFILE_ID,
        email=body.email,
        name=body.name,
        avatar_url=body.avatar_url,
    )


@profiles_router.get(
    "",
    response_model=list[ProfileResponse],
    summary="Get a list of all profiles",
    responses={**UNAUTHORIZED},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> list[ProfileResponse]:
    """Return every profile holding the profile role."""
    profiles = await service.list_profiles()
    return [_to_response(profile) for profile in profiles]


@profile_router.get(
    "/{profile_id}",
    response_model=ProfileResponse,
    summary="Returns a single profile",
    responses={
        **UNAUTHORIZED,
        **NOT_FOUND,
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    profile_id: str,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Find a profile by ID."""
    profile = await service.get(profile_id)
    return _to_response(profile)


@profile_router.post(
    "",
    response_model=ProfileMutationResponse,
    summary="Add a profile",
    responses={
        **UNAUTHORIZED,
        400: {"model": MessageResponse, "description": "Profile already exists"},
        404: {"model": MessageResponse, "description": "Profile missing"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def create_profile(
    request: Request,
    user: CurrentUser,
    body: OptionalProfileBody = None,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileMutationResponse:
    """Create a profile unless one with the same ID exists."""
    if body is None:
        raise ProfileMissingError(status_code=404)

    profile = await service.create(_to_entity(body))
    return ProfileMutationResponse(message="profile created", profile=_to_response(profile))


@profile_router.put(
    "",
    response_model=ProfileMutationResponse,
    summary="Update a profile",
    responses={
        **UNAUTHORIZED,
        400: {"model": MessageResponse, "description": "Profile missing"},
        404: {"model": MessageErrorResponse, "description": "Profile not found"},
        500: {"model": MessageErrorResponse, "description": "Update failed"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    user: CurrentUser,
    body: OptionalProfileBody = None,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileMutationResponse:
    """Replace email, name and avatar of an existing profile."""
    if body is None:
        raise ProfileMissingError(status_code=400)

    profile = await service.update(_to_entity(body))
    return ProfileMutationResponse(message="profile updated", profile=_to_response(profile))


@profile_router.delete(
    "/{profile_id}",
    response_model=ProfileMutationResponse,
    summary="Remove a profile",
    responses={
        **UNAUTHORIZED,
        **NOT_FOUND,
        500: {"model": MessageErrorResponse, "description": "Delete failed"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_profile(
    request: Request,
    profile_id: str,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileMutationResponse:
    """Delete a profile and everything in its cart."""
    profile = await service.delete(profile_id)
    return ProfileMutationResponse(
        message=f"Profile '{profile_id}' was deleted.",
        profile=_to_response(profile),
    )
