"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable
from uuid import UUID

from fastapi import Depends

from api.dependencies.auth import get_auth_provider
from domain.services.post_service import PostService
from domain.services.profile_service import ProfileService
from domain.services.user_service import UserService
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.github.client import GitHubClient


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_github_client() -> GitHubClient:
    """Get GitHub client instance."""
    return GitHubClient()


def get_user_service(
    auth_provider: JWTAuthProvider = Depends(get_auth_provider),
) -> UserService:
    """Get User service instance bound to the token provider."""
    return UserService(get_uow_factory(), auth_provider)


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_uow_factory(), repo_lookup=get_github_client())


@lru_cache
def get_post_service() -> PostService:
    """Get Post service instance."""
    return PostService(get_uow_factory())


def parse_uuid(value: str) -> UUID | None:
    """Parse a path identifier; malformed ids yield None."""
    try:
        return UUID(value)
    except ValueError:
        return None
