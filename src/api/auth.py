"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_user_repository
from src.schemas.auth import AuthResponse, LoginRequest, MessageResponse, SignupRequest
from src.services.auth import authenticate_user, register_user
from src.services.user_repository import UserRepository

router = APIRouter(prefix="/auth", tags=["auth"])

error_responses = {
    status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse},
}


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**error_responses, status.HTTP_409_CONFLICT: {"model": MessageResponse}},
)
def signup(
    payload: SignupRequest,
    repo: Annotated[UserRepository, Depends(get_user_repository)],
):
    """Register a new user."""
    user = register_user(repo, payload)
    return AuthResponse(message="User registered successfully", user=user)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={
        **error_responses,
        status.HTTP_401_UNAUTHORIZED: {"model": MessageResponse},
        status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
    },
)
def login(
    credentials: LoginRequest,
    repo: Annotated[UserRepository, Depends(get_user_repository)],
):
    """Login with email and password."""
    user = authenticate_user(repo, credentials)
    return AuthResponse(message="Login successful", user=user)


@router.options("/signup", include_in_schema=False)
@router.options("/login", include_in_schema=False)
def preflight() -> Response:
    """Answer bare preflight requests that CORS middleware lets through."""
    return Response(status_code=status.HTTP_200_OK)
