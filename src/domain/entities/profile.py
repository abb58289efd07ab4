"""Profile domain entity."""

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from uuid import UUID, uuid4


@dataclass
class SocialLinks:
    """Optional links to the user's accounts on other platforms."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))


@dataclass
class Experience:
    """A work experience entry embedded in a profile."""

    title: str
    company: str
    from_date: date
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None
    id: UUID = field(default_factory=uuid4)


@dataclass
class Education:
    """An education entry embedded in a profile."""

    school: str
    degree: str
    fieldofstudy: str
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None
    id: UUID = field(default_factory=uuid4)


@dataclass
class Profile:
    """Domain entity for a user's public profile."""

    user_id: UUID
    id: UUID = field(default_factory=uuid4)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    githubusername: str | None = None
    skills: list[str] = field(default_factory=list)
    social: SocialLinks = field(default_factory=SocialLinks)
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def add_experience(self, entry: Experience) -> None:
        """Insert an experience entry as the most recent one."""
        self.experience.insert(0, entry)

    def remove_experience(self, entry_id: UUID) -> bool:
        """Remove the experience entry with this id. Returns False if absent."""
        remaining = [e for e in self.experience if e.id != entry_id]
        removed = len(remaining) != len(self.experience)
        self.experience = remaining
        return removed

    def add_education(self, entry: Education) -> None:
        """Insert an education entry as the most recent one."""
        self.education.insert(0, entry)

    def remove_education(self, entry_id: UUID) -> bool:
        """Remove the education entry with this id. Returns False if absent."""
        remaining = [e for e in self.education if e.id != entry_id]
        removed = len(remaining) != len(self.education)
        self.education = remaining
        return removed


@dataclass
class ProfileFields:
    """Partial update for a profile: ``None`` means "leave as is".

    ``skills`` is the raw comma-separated input; ``social`` only replaces the
    stored links when at least one link is set.
    """

    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    githubusername: str | None = None
    skills: str | None = None
    social: SocialLinks = field(default_factory=SocialLinks)

    _SCALARS = ("company", "website", "location", "bio", "status", "githubusername")

    def apply_to(self, profile: Profile) -> Profile:
        for name in self._SCALARS:
            value = getattr(self, name)
            if value:
                setattr(profile, name, value)
        if self.skills:
            profile.skills = split_skills(self.skills)
        if not self.social.is_empty():
            profile.social = SocialLinks(
                **{f.name: getattr(self.social, f.name) or None for f in fields(self.social)}
            )
        return profile


def split_skills(raw: str) -> list[str]:
    """Split a comma-separated skill list, trimming whitespace and dropping blanks."""
    return [skill.strip() for skill in raw.split(",") if skill.strip()]


@dataclass(frozen=True, slots=True)
class ProfileOwner:
    """Read-only value object: the public part of a profile's user."""

    id: UUID
    name: str
    avatar: str | None


@dataclass(frozen=True, slots=True)
class ProfileWithOwner:
    """Read-only value object: a Profile bundled with its owner's name/avatar."""

    profile: Profile
    owner: ProfileOwner | None
