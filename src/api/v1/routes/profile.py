"""Profile API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_profile_service, parse_id
from api.v1.schemas.common import SuccessResponse
from api.v1.schemas.profile import (
    EducationRequest,
    EducationResponse,
    ExperienceRequest,
    ExperienceResponse,
    ProfileOwnerResponse,
    ProfileRequest,
    ProfileResponse,
)
from core.exceptions import (
    EducationNotFoundError,
    ExperienceNotFoundError,
    ProfileNotFoundError,
)
from core.rate_limit import limiter
from domain.entities.profile import Profile
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "",
    response_model=ProfileResponse,
    summary="Get my profile",
    responses={
        200: {"description": "The caller's profile"},
        401: {"description": "Not authenticated"},
        404: {"description": "No profile yet"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_my_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.get_for_user(user.id)
    return _profile_response(profile)


@router.get(
    "/all",
    response_model=list[ProfileResponse],
    summary="List all profiles",
    responses={
        200: {"description": "Every profile"},
        404: {"description": "There are no profiles"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> list[ProfileResponse]:
    profiles = await service.get_all()
    return [_profile_response(p) for p in profiles]


@router.get(
    "/handle/{handle}",
    response_model=ProfileResponse,
    summary="Get a profile by handle",
    responses={
        200: {"description": "Profile"},
        404: {"description": "No profile with that handle"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile_by_handle(
    request: Request,
    handle: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.get_by_handle(handle)
    return _profile_response(profile)


@router.get(
    "/user/{user_id}",
    response_model=ProfileResponse,
    summary="Get a profile by user ID",
    responses={
        200: {"description": "Profile"},
        404: {"description": "That user has no profile"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile_by_user(
    request: Request,
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.get_for_user(parse_id(user_id, ProfileNotFoundError()))
    return _profile_response(profile)


@router.post(
    "",
    response_model=ProfileResponse,
    summary="Create or update my profile",
    responses={
        200: {"description": "Profile saved"},
        400: {"description": "Validation error or handle taken"},
        401: {"description": "Not authenticated"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def save_profile(
    request: Request,
    body: ProfileRequest,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """
    Create the caller's profile, or update it if one exists.

    `skills` is a comma-separated string (a JSON list is accepted too).
    Social links are sent as top-level fields and stored under `social`.
    """
    profile = await service.upsert(user.id, body.model_dump(exclude_none=True))
    return _profile_response(profile)


@router.post(
    "/experience",
    response_model=ProfileResponse,
    summary="Add an experience entry",
    responses={
        200: {"description": "Entry added to the front of the list"},
        400: {"description": "Validation error"},
        404: {"description": "No profile yet"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def add_experience(
    request: Request,
    body: ExperienceRequest,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.add_experience(
        user.id, body.model_dump(by_alias=True, exclude_none=True)
    )
    return _profile_response(profile)


@router.post(
    "/education",
    response_model=ProfileResponse,
    summary="Add an education entry",
    responses={
        200: {"description": "Entry added to the front of the list"},
        400: {"description": "Validation error"},
        404: {"description": "No profile yet"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def add_education(
    request: Request,
    body: EducationRequest,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.add_education(
        user.id, body.model_dump(by_alias=True, exclude_none=True)
    )
    return _profile_response(profile)


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileResponse,
    summary="Remove an experience entry",
    responses={
        200: {"description": "Entry removed"},
        404: {"description": "No profile, or no such entry"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def remove_experience(
    request: Request,
    exp_id: str,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.remove_experience(
        user.id, parse_id(exp_id, ExperienceNotFoundError())
    )
    return _profile_response(profile)


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileResponse,
    summary="Remove an education entry",
    responses={
        200: {"description": "Entry removed"},
        404: {"description": "No profile, or no such entry"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def remove_education(
    request: Request,
    edu_id: str,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.remove_education(
        user.id, parse_id(edu_id, EducationNotFoundError())
    )
    return _profile_response(profile)


@router.delete(
    "",
    response_model=SuccessResponse,
    summary="Delete my account",
    responses={
        200: {"description": "Profile and user deleted"},
        401: {"description": "Not authenticated"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_account(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> SuccessResponse:
    """Delete the caller's profile and then their user account."""
    await service.delete_account(user.id)
    return SuccessResponse()


def _profile_response(profile: Profile) -> ProfileResponse:
    """Convert domain entity to response schema."""
    owner = profile.owner
    return ProfileResponse(
        id=profile.id,
        user=ProfileOwnerResponse(
            id=profile.user_id,
            name=owner.name if owner else None,
            avatar=owner.avatar if owner else None,
        ),
        handle=profile.handle,
        company=profile.company,
        website=profile.website,
        location=profile.location,
        status=profile.status,
        skills=profile.skills,
        bio=profile.bio,
        github_username=profile.github_username,
        social=profile.social.to_dict(),
        experience=[
            ExperienceResponse(
                id=e.id,
                title=e.title,
                company=e.company,
                location=e.location,
                from_date=e.from_date,
                to_date=e.to_date,
                current=e.current,
                description=e.description,
            )
            for e in profile.experience
        ],
        education=[
            EducationResponse(
                id=e.id,
                school=e.school,
                degree=e.degree,
                field_of_study=e.field_of_study,
                from_date=e.from_date,
                to_date=e.to_date,
                current=e.current,
                description=e.description,
            )
            for e in profile.education
        ],
        created_at=profile.created_at,
    )
