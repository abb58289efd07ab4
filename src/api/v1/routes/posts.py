"""Post API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_post_service, parse_uuid
from api.v1.schemas.common import MessageResponse
from api.v1.schemas.post import (
    CommentCreate,
    CommentResponse,
    LikeResponse,
    PostCreate,
    PostResponse,
)
from core.exceptions import PostNotFoundError
from domain.entities.post import Comment, Like, Post
from domain.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


def _post_id(value: str) -> UUID:
    post_id = parse_uuid(value)
    if post_id is None:
        raise PostNotFoundError(value)
    return post_id


def _likes(likes: list[Like]) -> list[LikeResponse]:
    return [LikeResponse(user=like.user_id) for like in likes]


def _comments(comments: list[Comment]) -> list[CommentResponse]:
    return [
        CommentResponse(
            id=c.id,
            user=c.user_id,
            text=c.text,
            name=c.name,
            avatar=c.avatar,
            created_at=c.created_at,
        )
        for c in comments
    ]


def _to_response(post: Post) -> PostResponse:
    return PostResponse(
        id=post.id,
        user=post.user_id,
        text=post.text,
        name=post.name,
        avatar=post.avatar,
        likes=_likes(post.likes),
        comments=_comments(post.comments),
        created_at=post.created_at,
    )


@router.post(
    "",
    response_model=PostResponse,
    summary="Create a post",
)
async def create_post(
    body: PostCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = await service.create(user.id, body.text)
    return _to_response(post)


@router.get(
    "",
    response_model=list[PostResponse],
    summary="List all posts",
)
async def list_posts(
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    """All posts, newest first."""
    return [_to_response(post) for post in await service.list_all()]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get a post",
    responses={404: {"description": "Post not found"}},
)
async def get_post(
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return _to_response(await service.get_by_id(_post_id(post_id)))


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Delete a post",
    responses={
        403: {"description": "User not authorized"},
        404: {"description": "Post not found"},
    },
)
async def delete_post(
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    await service.delete(user.id, _post_id(post_id))
    return MessageResponse(message="Post removed")


@router.put(
    "/like/{post_id}",
    response_model=list[LikeResponse],
    summary="Like a post",
    responses={400: {"description": "Post already liked"}},
)
async def like_post(
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[LikeResponse]:
    return _likes(await service.like(user.id, _post_id(post_id)))


@router.put(
    "/unlike/{post_id}",
    response_model=list[LikeResponse],
    summary="Unlike a post",
    responses={400: {"description": "Post has not yet been liked"}},
)
async def unlike_post(
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[LikeResponse]:
    return _likes(await service.unlike(user.id, _post_id(post_id)))


@router.post(
    "/comment/{post_id}",
    response_model=list[CommentResponse],
    summary="Comment on a post",
    responses={404: {"description": "Post not found"}},
)
async def add_comment(
    post_id: str,
    body: CommentCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    return _comments(await service.add_comment(user.id, _post_id(post_id), body.text))


@router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=list[CommentResponse],
    summary="Delete a comment",
    responses={
        403: {"description": "User not authorized"},
        404: {"description": "Post or comment not found"},
    },
)
async def remove_comment(
    post_id: str,
    comment_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> list[CommentResponse]:
    return _comments(
        await service.remove_comment(user.id, _post_id(post_id), parse_uuid(comment_id))
    )
