"""Profile API routes."""

from typing import Any

from fastapi import APIRouter, Depends

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_profile_service, parse_uuid
from api.v1.schemas.common import MessageResponse
from api.v1.schemas.profile import (
    EducationCreate,
    EducationResponse,
    ExperienceCreate,
    ExperienceResponse,
    ProfileOwnerResponse,
    ProfileResponse,
    ProfileUpsert,
    SocialResponse,
)
from core.exceptions import ProfileNotFoundError
from domain.entities.profile import (
    Education,
    Experience,
    Profile,
    ProfileFields,
    ProfileWithOwner,
    SocialLinks,
)
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


def _to_response(profile: Profile, owner: ProfileOwnerResponse | None = None) -> ProfileResponse:
    return ProfileResponse(
        id=profile.id,
        user_id=profile.user_id,
        user=owner,
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        status=profile.status,
        githubusername=profile.githubusername,
        skills=profile.skills,
        social=SocialResponse(**vars(profile.social)),
        experience=[ExperienceResponse.model_validate(e) for e in profile.experience],
        education=[EducationResponse.model_validate(e) for e in profile.education],
        created_at=profile.created_at,
    )


def _joined_response(item: ProfileWithOwner) -> ProfileResponse:
    owner = ProfileOwnerResponse.model_validate(item.owner) if item.owner else None
    return _to_response(item.profile, owner)


@router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get the caller's profile",
    responses={404: {"description": "There is no profile for this user"}},
)
async def get_my_profile(
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    return _joined_response(await service.get_own(user.id))


@router.post(
    "",
    response_model=ProfileResponse,
    summary="Create or update the caller's profile",
)
async def upsert_profile(
    body: ProfileUpsert,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Create the profile on first call; afterwards overwrite only the fields sent."""
    fields = ProfileFields(
        company=body.company,
        website=body.website,
        location=body.location,
        bio=body.bio,
        status=body.status,
        githubusername=body.githubusername,
        skills=body.skills,
        social=SocialLinks(
            youtube=body.youtube,
            twitter=body.twitter,
            facebook=body.facebook,
            linkedin=body.linkedin,
            instagram=body.instagram,
        ),
    )
    profile = await service.upsert(user.id, fields)
    return _to_response(profile)


@router.get(
    "",
    response_model=list[ProfileResponse],
    summary="List all profiles",
)
async def list_profiles(
    service: ProfileService = Depends(get_profile_service),
) -> list[ProfileResponse]:
    return [_joined_response(item) for item in await service.list_all()]


@router.get(
    "/user/{user_id}",
    response_model=ProfileResponse,
    summary="Get a profile by user ID",
    responses={404: {"description": "Profile not found"}},
)
async def get_profile_by_user(
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    owner_id = parse_uuid(user_id)
    if owner_id is None:
        raise ProfileNotFoundError(user_id)
    return _joined_response(await service.get_by_user(owner_id))


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete the caller's profile and account",
)
async def delete_profile(
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Remove the profile and the user. Posts by the user are kept."""
    await service.delete_with_account(user.id)
    return MessageResponse(message="User and profile removed")


@router.put(
    "/experience",
    response_model=ProfileResponse,
    summary="Add a work experience entry",
    responses={404: {"description": "There is no profile for this user"}},
)
async def add_experience(
    body: ExperienceCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    entry = Experience(
        title=body.title,
        company=body.company,
        location=body.location,
        from_date=body.from_date,
        to_date=body.to_date,
        current=body.current,
        description=body.description,
    )
    return _to_response(await service.add_experience(user.id, entry))


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileResponse,
    summary="Remove a work experience entry",
)
async def remove_experience(
    exp_id: str,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Unknown entry ids leave the profile unchanged."""
    return _to_response(await service.remove_experience(user.id, parse_uuid(exp_id)))


@router.put(
    "/education",
    response_model=ProfileResponse,
    summary="Add an education entry",
    responses={404: {"description": "There is no profile for this user"}},
)
async def add_education(
    body: EducationCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    entry = Education(
        school=body.school,
        degree=body.degree,
        fieldofstudy=body.fieldofstudy,
        from_date=body.from_date,
        to_date=body.to_date,
        current=body.current,
        description=body.description,
    )
    return _to_response(await service.add_education(user.id, entry))


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileResponse,
    summary="Remove an education entry",
)
async def remove_education(
    edu_id: str,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Unknown entry ids leave the profile unchanged."""
    return _to_response(await service.remove_education(user.id, parse_uuid(edu_id)))


@router.get(
    "/github/{username}",
    summary="List a GitHub user's repositories",
    responses={404: {"description": "No Github profile found"}},
)
async def get_github_repos(
    username: str,
    service: ProfileService = Depends(get_profile_service),
) -> list[dict[str, Any]]:
    """Five repositories, oldest first, straight from GitHub."""
    return await service.get_github_repos(username)
