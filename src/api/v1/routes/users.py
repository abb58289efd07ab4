"""User registration routes."""

from fastapi import APIRouter, Depends

from api.v1.dependencies import get_user_service
from api.v1.schemas.user import TokenResponse, UserRegister
from domain.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=TokenResponse,
    summary="Register a user",
    responses={
        200: {"description": "User registered, token issued"},
        400: {"description": "Invalid input or user already exists"},
    },
)
async def register_user(
    body: UserRegister,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Create an account and return a signed session token."""
    token = await service.register(
        name=body.name,
        email=body.email,
        password=body.password,
    )
    return TokenResponse(token=token)
