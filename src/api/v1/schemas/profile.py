"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProfileUpsert(BaseModel):
    """Schema for creating or updating the caller's profile.

    Every field is optional; only non-empty ones are written. ``skills`` is a
    comma-separated list.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "Developer",
                "company": "Analytical Engines Ltd",
                "skills": "Python, SQL, FastAPI",
                "githubusername": "ada",
                "twitter": "https://twitter.com/ada",
            }
        },
    )

    company: str | None = Field(None, max_length=255)
    website: str | None = Field(None, max_length=500)
    location: str | None = Field(None, max_length=255)
    bio: str | None = None
    status: str | None = Field(None, max_length=255)
    githubusername: str | None = Field(None, max_length=100)
    skills: str | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ExperienceCreate(BaseModel):
    """Schema for adding a work experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    location: str | None = None
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class EducationCreate(BaseModel):
    """Schema for adding an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: str = Field(..., min_length=1)
    degree: str = Field(..., min_length=1)
    fieldofstudy: str = Field(..., min_length=1)
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class SocialResponse(BaseModel):
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ExperienceResponse(BaseModel):
    """Schema for an experience entry."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    title: str
    company: str
    location: str | None = None
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool
    description: str | None = None


class EducationResponse(BaseModel):
    """Schema for an education entry."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool
    description: str | None = None


class ProfileOwnerResponse(BaseModel):
    """Public part of the profile's user."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    avatar: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response.

    ``user`` is filled on reads that join the owner (``/me``, list, by user).
    """

    id: UUID
    user_id: UUID
    user: ProfileOwnerResponse | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    githubusername: str | None = None
    skills: list[str]
    social: SocialResponse
    experience: list[ExperienceResponse]
    education: list[EducationResponse]
    created_at: datetime
