"""Profile service layer with business logic."""

from collections.abc import Callable
from typing import Any, Protocol
from uuid import UUID

import structlog

from core.exceptions import ProfileNotFoundError
from domain.entities.profile import (
    Education,
    Experience,
    Profile,
    ProfileFields,
    ProfileWithOwner,
)
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class IRepoLookup(Protocol):
    """Third-party lookup of a user's public code repositories."""

    async def get_user_repos(self, username: str) -> list[dict[str, Any]]:
        ...


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        repo_lookup: IRepoLookup | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._repo_lookup = repo_lookup

    async def get_own(self, user_id: UUID) -> ProfileWithOwner:
        """Get the caller's profile with their name and avatar."""
        return await self.get_by_user(user_id)

    async def get_by_user(self, user_id: UUID) -> ProfileWithOwner:
        """Get a user's profile with their name and avatar."""
        async with self._uow_factory() as uow:
            found = await uow.profiles.get_with_owner(user_id)
            if not found:
                raise ProfileNotFoundError(str(user_id))
            return found

    async def list_all(self) -> list[ProfileWithOwner]:
        """Get every profile with its owner's name and avatar."""
        async with self._uow_factory() as uow:
            return await uow.profiles.list_with_owner()  # type: ignore[no-any-return]

    async def upsert(self, user_id: UUID, fields: ProfileFields) -> Profile:
        """Create the caller's profile, or update the provided fields in place."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if profile:
                saved = await uow.profiles.update(fields.apply_to(profile))
            else:
                saved = await uow.profiles.create(fields.apply_to(Profile(user_id=user_id)))
                logger.info("profile_created", user_id=str(user_id))
            await uow.commit()
            return saved  # type: ignore[no-any-return]

    async def delete_with_account(self, user_id: UUID) -> None:
        """Delete the caller's profile and account.

        Posts written by the user are left in place.
        """
        async with self._uow_factory() as uow:
            await uow.profiles.delete_by_user(user_id)
            await uow.users.delete(user_id)
            await uow.commit()
        logger.info("account_deleted", user_id=str(user_id))

    async def add_experience(self, user_id: UUID, entry: Experience) -> Profile:
        """Prepend a work experience entry to the caller's profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_experience(entry)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated  # type: ignore[no-any-return]

    async def remove_experience(self, user_id: UUID, entry_id: UUID | None) -> Profile:
        """Remove an experience entry. Unknown ids leave the profile unchanged."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            if entry_id is None or not profile.remove_experience(entry_id):
                return profile
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated  # type: ignore[no-any-return]

    async def add_education(self, user_id: UUID, entry: Education) -> Profile:
        """Prepend an education entry to the caller's profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_education(entry)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated  # type: ignore[no-any-return]

    async def remove_education(self, user_id: UUID, entry_id: UUID | None) -> Profile:
        """Remove an education entry. Unknown ids leave the profile unchanged."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            if entry_id is None or not profile.remove_education(entry_id):
                return profile
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated  # type: ignore[no-any-return]

    async def get_github_repos(self, username: str) -> list[dict[str, Any]]:
        """Proxy the repository lookup for a GitHub username."""
        if self._repo_lookup is None:
            raise RuntimeError("ProfileService was built without a repository lookup")
        return await self._repo_lookup.get_user_repos(username)

    async def _require_profile(self, uow: IUnitOfWork, user_id: UUID) -> Profile:
        profile = await uow.profiles.get_by_user(user_id)
        if not profile:
            raise ProfileNotFoundError(str(user_id))
        return profile
