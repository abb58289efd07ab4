"""User service: registration, login and token issuance."""

from collections.abc import Callable
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    DuplicateUserError,
    InvalidCredentialsError,
    UserNotFoundError,
    ValidationError,
)
from core.security import (
    MAX_PASSWORD_BYTES,
    gravatar_url,
    hash_password,
    password_fits,
    verify_password,
)
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.auth.provider import IAuthProvider, TokenUser

logger = structlog.get_logger()


class UserService:
    """Service layer for accounts and credentials."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        auth_provider: IAuthProvider,
    ) -> None:
        self._uow_factory = uow_factory
        self._auth = auth_provider

    async def register(self, name: str, email: str, password: str) -> str:
        """Create an account and return a signed token for it.

        Raises:
            ValidationError: If the password is longer than bcrypt accepts
            DuplicateUserError: If the email is already registered
        """
        if not password_fits(password):
            raise ValidationError.for_field(
                "password", f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )

        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(email):
                raise DuplicateUserError(email)

            user = User(
                name=name,
                email=email,
                avatar=gravatar_url(email),
                password=hash_password(password),
            )

            try:
                created = await uow.users.create(user)
                await uow.commit()
            except IntegrityError as exc:
                # Lost a race against a concurrent registration for the same email
                await uow.rollback()
                raise DuplicateUserError(email) from exc

        logger.info("user_registered", user_id=str(created.id))
        return self._auth.create_token(TokenUser(id=created.id))

    async def authenticate(self, email: str, password: str) -> str:
        """Check an email/password pair and return a signed token.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email)

        if not user or not verify_password(password, user.password):
            logger.info("login_failed")
            raise InvalidCredentialsError()

        return self._auth.create_token(TokenUser(id=user.id))

    async def get_by_id(self, user_id: UUID) -> User:
        """Get the account behind an authenticated request."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))
            return user
