"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class User:
    """Domain entity for a registered account."""

    name: str
    email: str
    password: str = field(repr=False, default="")
    avatar: str | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True, slots=True)
class AuthorSnapshot:
    """Read-only value object: name and avatar copied onto posts and comments."""

    user_id: UUID
    name: str
    avatar: str | None

    @classmethod
    def of(cls, user: User) -> "AuthorSnapshot":
        return cls(user_id=user.id, name=user.name, avatar=user.avatar)
