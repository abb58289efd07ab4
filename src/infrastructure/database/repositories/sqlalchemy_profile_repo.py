"""SQLAlchemy implementation of Profile repository."""

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import (
    Education,
    Experience,
    Profile,
    ProfileOwner,
    ProfileWithOwner,
    SocialLinks,
)
from infrastructure.database.models import ProfileModel, UserModel


def _date_or_none(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_with_owner(self, user_id: UUID) -> ProfileWithOwner | None:
        """Get a user's profile joined with the owner's name and avatar."""
        stmt = (
            select(ProfileModel, UserModel)
            .outerjoin(UserModel, ProfileModel.user_id == UserModel.id)
            .where(ProfileModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        return self._with_owner(row[0], row[1])

    async def list_with_owner(self) -> list[ProfileWithOwner]:
        """Get all profiles joined with their owners' name and avatar."""
        stmt = (
            select(ProfileModel, UserModel)
            .outerjoin(UserModel, ProfileModel.user_id == UserModel.id)
            .order_by(ProfileModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._with_owner(profile, user) for profile, user in result]

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = ProfileModel(id=profile.id, user_id=profile.user_id, created_at=profile.created_at)
        self._apply(profile, model)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Replace the stored fields of an existing profile."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        self._apply(profile, model)
        await self._session.flush()
        return self._to_entity(model)

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        stmt = delete(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    def _with_owner(self, model: ProfileModel, user: UserModel | None) -> ProfileWithOwner:
        owner = ProfileOwner(id=user.id, name=user.name, avatar=user.avatar) if user else None
        return ProfileWithOwner(profile=self._to_entity(model), owner=owner)

    def _apply(self, entity: Profile, model: ProfileModel) -> None:
        """Copy every mutable entity field onto the ORM model."""
        model.company = entity.company
        model.website = entity.website
        model.location = entity.location
        model.bio = entity.bio
        model.status = entity.status
        model.githubusername = entity.githubusername
        model.skills = list(entity.skills)
        model.social = {
            key: value for key, value in vars(entity.social).items() if value is not None
        }
        model.experience = [self._experience_to_json(e) for e in entity.experience]
        model.education = [self._education_to_json(e) for e in entity.education]

    @staticmethod
    def _experience_to_json(entry: Experience) -> dict[str, Any]:
        return {
            "id": str(entry.id),
            "title": entry.title,
            "company": entry.company,
            "location": entry.location,
            "from": entry.from_date.isoformat(),
            "to": entry.to_date.isoformat() if entry.to_date else None,
            "current": entry.current,
            "description": entry.description,
        }

    @staticmethod
    def _education_to_json(entry: Education) -> dict[str, Any]:
        return {
            "id": str(entry.id),
            "school": entry.school,
            "degree": entry.degree,
            "fieldofstudy": entry.fieldofstudy,
            "from": entry.from_date.isoformat(),
            "to": entry.to_date.isoformat() if entry.to_date else None,
            "current": entry.current,
            "description": entry.description,
        }

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            company=model.company,
            website=model.website,
            location=model.location,
            bio=model.bio,
            status=model.status,
            githubusername=model.githubusername,
            skills=list(model.skills or []),
            social=SocialLinks(**(model.social or {})),
            experience=[
                Experience(
                    id=UUID(item["id"]),
                    title=item["title"],
                    company=item["company"],
                    location=item.get("location"),
                    from_date=date.fromisoformat(item["from"]),
                    to_date=_date_or_none(item.get("to")),
                    current=bool(item.get("current")),
                    description=item.get("description"),
                )
                for item in model.experience or []
            ],
            education=[
                Education(
                    id=UUID(item["id"]),
                    school=item["school"],
                    degree=item["degree"],
                    fieldofstudy=item["fieldofstudy"],
                    from_date=date.fromisoformat(item["from"]),
                    to_date=_date_or_none(item.get("to")),
                    current=bool(item.get("current")),
                    description=item.get("description"),
                )
                for item in model.education or []
            ],
            created_at=model.created_at,
        )
