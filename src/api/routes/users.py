"""User account routes (register, login, logout, profile)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_user_repo
from api.models import (
    LoginRequest,
    LogoutRequest,
    ProfileChangesRequest,
    RegisterRequest,
    UserResponse,
)
from domain.model.errors import (
    ConflictError,
    DomainError,
    InvalidArgumentError,
    NotFoundError,
    UnauthorizedError,
)
from domain.model.user import ProfileChanges
from port.user_repository import UserRepository
from services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

_STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
}


def _to_http_error(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTPException the client should see."""
    status_code = _STATUS_BY_ERROR.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("User operation failed", extra={"error": str(error)})
    return HTTPException(status_code=status_code, detail=str(error))


@router.get("/users", response_model=list[UserResponse])
async def get_all_users(repo: UserRepository = Depends(get_user_repo)):
    """List all users."""
    users = user_service.list_users(repo)
    return [UserResponse.from_domain(u) for u in users]


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, repo: UserRepository = Depends(get_user_repo)):
    """Get a single user.

    Raises:
        HTTPException: 404 if the user does not exist
    """
    try:
        user = user_service.get_user(repo, user_id)
    except DomainError as e:
        raise _to_http_error(e)
    return UserResponse.from_domain(user)


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(request: RegisterRequest, repo: UserRepository = Depends(get_user_repo)):
    """Register a new user. The new user starts out online.

    Raises:
        HTTPException: 409 if username and/or name are taken, 400 if blank
    """
    try:
        user = user_service.register(repo, request.username, request.name)
    except DomainError as e:
        logger.info("User registration rejected", extra={"username": request.username, "reason": str(e)})
        raise _to_http_error(e)

    logger.info("User registered", extra={"userId": user.id, "username": user.username})
    return UserResponse.from_domain(user)


@router.put("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def edit_user(
    user_id: str,
    request: ProfileChangesRequest,
    repo: UserRepository = Depends(get_user_repo),
):
    """Edit username and/or birth date of a user.

    Raises:
        HTTPException: 404 unknown user, 409 username taken, 400 bad birth date
    """
    changes = ProfileChanges(username=request.username, birth_date=request.birth_date)
    try:
        user = user_service.get_user(repo, user_id)
        user_service.edit_profile(repo, user, changes)
    except DomainError as e:
        raise _to_http_error(e)

    logger.info("User profile edited", extra={"userId": user_id})


@router.post("/login", response_model=UserResponse)
async def login(request: LoginRequest, repo: UserRepository = Depends(get_user_repo)):
    """Log a user in by username and name.

    Raises:
        HTTPException: 404 unknown username, 401 wrong name
    """
    try:
        user = user_service.authenticate(repo, request.username, request.name)
    except DomainError as e:
        logger.info("Login rejected", extra={"username": request.username, "reason": str(e)})
        raise _to_http_error(e)

    logger.info("User logged in", extra={"userId": user.id, "username": user.username})
    return UserResponse.from_domain(user)


@router.put("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(request: LogoutRequest, repo: UserRepository = Depends(get_user_repo)):
    """Set a user offline.

    Raises:
        HTTPException: 404 unknown user
    """
    try:
        user_service.deauthenticate(repo, request.id)
    except DomainError as e:
        raise _to_http_error(e)

    logger.info("User logged out", extra={"userId": request.id})
