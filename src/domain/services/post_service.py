"""Post service layer with business logic."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import (
    CommentNotFoundError,
    NotCommentAuthorError,
    NotPostAuthorError,
    PostAlreadyLikedError,
    PostNotFoundError,
    PostNotLikedError,
    UserNotFoundError,
)
from domain.entities.post import Comment, Like, Post
from domain.entities.user import AuthorSnapshot
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class PostService:
    """Service layer for Post business logic.

    Likes and comments are read-modify-write on the post; concurrent updates
    to the same post are last-write-wins.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(self, user_id: UUID, text: str) -> Post:
        """Create a post carrying the author's current name and avatar."""
        async with self._uow_factory() as uow:
            author = await self._require_author(uow, user_id)
            created = await uow.posts.create(Post.by(author, text))
            await uow.commit()

        logger.info("post_created", post_id=str(created.id), user_id=str(user_id))
        return created  # type: ignore[no-any-return]

    async def list_all(self) -> list[Post]:
        """Get all posts, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_all()  # type: ignore[no-any-return]

    async def get_by_id(self, post_id: UUID) -> Post:
        async with self._uow_factory() as uow:
            return await self._require_post(uow, post_id)

    async def delete(self, user_id: UUID, post_id: UUID) -> None:
        """Delete a post. Only its author may do so."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if post.user_id != user_id:
                raise NotPostAuthorError(str(post_id))

            await uow.posts.delete(post_id)
            await uow.commit()

        logger.info("post_deleted", post_id=str(post_id))

    async def like(self, user_id: UUID, post_id: UUID) -> list[Like]:
        """Like a post once. Returns the updated likes, most recent first."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if post.is_liked_by(user_id):
                raise PostAlreadyLikedError(str(post_id))

            post.like(user_id)
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.likes  # type: ignore[no-any-return]

    async def unlike(self, user_id: UUID, post_id: UUID) -> list[Like]:
        """Withdraw a like. Returns the updated likes."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if not post.is_liked_by(user_id):
                raise PostNotLikedError(str(post_id))

            post.unlike(user_id)
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.likes  # type: ignore[no-any-return]

    async def add_comment(self, user_id: UUID, post_id: UUID, text: str) -> list[Comment]:
        """Prepend a comment. Returns the updated comments, most recent first."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            author = await self._require_author(uow, user_id)

            post.add_comment(Comment.by(author, text))
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.comments  # type: ignore[no-any-return]

    async def remove_comment(
        self, user_id: UUID, post_id: UUID, comment_id: UUID | None
    ) -> list[Comment]:
        """Delete a comment. Only its author may do so."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)

            comment = post.get_comment(comment_id) if comment_id else None
            if not comment:
                raise CommentNotFoundError(str(comment_id))
            if comment.user_id != user_id:
                raise NotCommentAuthorError(str(comment_id))

            post.remove_comment(comment.id)
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.comments  # type: ignore[no-any-return]

    async def _require_post(self, uow: IUnitOfWork, post_id: UUID) -> Post:
        post = await uow.posts.get(post_id)
        if not post:
            raise PostNotFoundError(str(post_id))
        return post

    async def _require_author(self, uow: IUnitOfWork, user_id: UUID) -> AuthorSnapshot:
        user = await uow.users.get(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return AuthorSnapshot.of(user)
