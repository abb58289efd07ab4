"""Authentication routes."""

from fastapi import APIRouter, Depends

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_user_service
from api.v1.schemas.user import TokenResponse, UserLogin, UserResponse
from domain.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "",
    response_model=UserResponse,
    summary="Get the authenticated user",
)
async def get_auth_user(
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    account = await service.get_by_id(user.id)
    return UserResponse.model_validate(account)


@router.post(
    "",
    response_model=TokenResponse,
    summary="Log in",
    responses={400: {"description": "Invalid credentials"}},
)
async def login(
    body: UserLogin,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Exchange an email and password for a signed session token."""
    token = await service.authenticate(body.email, body.password)
    return TokenResponse(token=token)
