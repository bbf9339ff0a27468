"""User endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from clinic_api.core.access import CallerContext, Role
from clinic_api.core.exceptions import NotFoundException, UnauthenticatedException
from clinic_api.dependencies import AdminCaller, UserServiceDep, ensure_owner, require_roles
from clinic_api.schemas.common import MessageResponse
from clinic_api.schemas.users import (
    TokenResponse,
    UserCreate,
    UserCreatedResponse,
    UserFilters,
    UserLogin,
    UserResponse,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["Users"])

UserViewer = Annotated[CallerContext, Depends(require_roles(Role.ADMIN, Role.PATIENT))]

SELF_ONLY = "Forbidden: You do not have access to this resource"


@router.post(
    "",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register user",
)
async def register_user(user_data: UserCreate, service: UserServiceDep) -> UserCreatedResponse:
    """
    Register a new user.

    Args:
        user_data: Name, email, password and role
        service: User service

    Returns:
        ID of the new user

    Raises:
        BadRequestException: If the email is already registered
    """
    user_id = await service.create_user(user_data)
    return UserCreatedResponse(user_id=user_id)


@router.post("/login", response_model=TokenResponse, summary="Log in")
async def login(credentials: UserLogin, service: UserServiceDep) -> TokenResponse:
    """
    Exchange email and password for an access token.

    Raises:
        UnauthenticatedException: If the credentials do not match
    """
    token = await service.authenticate_user(credentials.email, credentials.password)
    if token is None:
        raise UnauthenticatedException("Invalid credentials")
    return TokenResponse(token=token)


@router.get("", response_model=list[UserResponse], summary="Search users (admin only)")
async def search_users(
    service: UserServiceDep,
    admin: AdminCaller,
    role: Role | None = Query(None, description="Filter by role"),
    name: str | None = Query(None, description="Filter by name substring"),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Items per page"),
) -> list[UserResponse]:
    """Search users by role and name, paginated."""
    filters = UserFilters(role=role, name=name, page=page, limit=limit)
    return await service.search_users(filters)


@router.get("/{user_id}", response_model=UserResponse, summary="Get user")
async def get_user(user_id: int, caller: UserViewer, service: UserServiceDep) -> UserResponse:
    """
    Get a user by ID.

    Patients may only fetch themselves.

    Raises:
        ForbiddenException: If a patient asks for another user
        NotFoundException: If user not found
    """
    ensure_owner(caller, user_id, SELF_ONLY, exempt_roles=(Role.ADMIN,))

    user = await service.get_user_by_id(user_id)
    if user is None:
        raise NotFoundException("User not found")
    return user


@router.put("/{user_id}", response_model=MessageResponse, summary="Update user")
async def update_user(
    user_id: int,
    user_data: UserUpdate,
    caller: UserViewer,
    service: UserServiceDep,
) -> MessageResponse:
    """
    Update a user's name, email or password.

    Admins may update anyone; patients only themselves.

    Args:
        user_id: User to update
        user_data: Fields to change
        caller: Authenticated admin or patient
        service: User service

    Returns:
        Confirmation message

    Raises:
        ForbiddenException: If a patient targets another user
        BadRequestException: If the user is missing or the email is taken
    """
    ensure_owner(caller, user_id, SELF_ONLY, exempt_roles=(Role.ADMIN,))

    await service.update_user(user_id, user_data)
    return MessageResponse(message="User updated successfully")


@router.delete("/{user_id}", response_model=MessageResponse, summary="Delete user (admin only)")
async def delete_user(user_id: int, admin: AdminCaller, service: UserServiceDep) -> MessageResponse:
    """
    Delete a user together with everything that references them.

    Raises:
        BadRequestException: If user not found
    """
    await service.delete_user(user_id)
    return MessageResponse(message="User deleted successfully")
