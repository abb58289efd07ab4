"""Post domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from domain.entities.user import AuthorSnapshot


@dataclass
class Like:
    """A user's like on a post."""

    user_id: UUID


@dataclass
class Comment:
    """A comment embedded in a post, with the author's snapshot."""

    user_id: UUID
    text: str
    name: str
    avatar: str | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def by(cls, author: AuthorSnapshot, text: str) -> "Comment":
        return cls(user_id=author.user_id, text=text, name=author.name, avatar=author.avatar)


@dataclass
class Post:
    """Domain entity for a Post.

    ``name`` and ``avatar`` are copied from the author when the post is
    created and are not kept in sync afterwards.
    """

    user_id: UUID
    text: str
    name: str
    avatar: str | None = None
    id: UUID = field(default_factory=uuid4)
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def by(cls, author: AuthorSnapshot, text: str) -> "Post":
        return cls(user_id=author.user_id, text=text, name=author.name, avatar=author.avatar)

    def is_liked_by(self, user_id: UUID) -> bool:
        return any(like.user_id == user_id for like in self.likes)

    def like(self, user_id: UUID) -> None:
        """Add the user's like as the most recent one."""
        self.likes.insert(0, Like(user_id=user_id))

    def unlike(self, user_id: UUID) -> None:
        """Remove the user's like."""
        self.likes = [like for like in self.likes if like.user_id != user_id]

    def get_comment(self, comment_id: UUID) -> Comment | None:
        return next((c for c in self.comments if c.id == comment_id), None)

    def add_comment(self, comment: Comment) -> None:
        """Insert a comment as the most recent one."""
        self.comments.insert(0, comment)

    def remove_comment(self, comment_id: UUID) -> None:
        self.comments = [c for c in self.comments if c.id != comment_id]
