"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel, Field

from roster.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    RemoveUserRequest,
    RemoveUserUseCase,
    UpdateUserRoleRequest,
    UpdateUserRoleUseCase,
    UpdateUserStatusRequest,
    UpdateUserStatusUseCase,
    UserItem,
)
from roster.domain.value import UserRole, UserStatus
from roster.interface.api.deps import ActorId

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class CreateUserAPIRequest(BaseModel):
    """API request for creating a user directly."""

    username: str
    email: str
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    password: str = Field(repr=False)
    role: UserRole = UserRole.MEMBER


class UpdateRoleAPIRequest(BaseModel):
    """API request for changing a role."""

    role: UserRole


class UpdateStatusAPIRequest(BaseModel):
    """API request for changing a status."""

    status: UserStatus


@router.get("", response_model=ListUsersResponse)
async def list_users(
    actor_id: ActorId,
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> ListUsersResponse:
    """List members of the caller's organization."""
    return await list_users_use_case.execute(ListUsersRequest(actor_id=actor_id))


@router.post("", response_model=UserItem, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserAPIRequest,
    actor_id: ActorId,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> UserItem:
    """Create a user in the caller's organization (administrators only)."""
    return await create_user_use_case.execute(
        CreateUserRequest(actor_id=actor_id, **request.model_dump())
    )


@router.get("/{user_id}", response_model=UserItem)
async def get_user(
    user_id: UUID,
    actor_id: ActorId,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserItem:
    """Get one member of the caller's organization."""
    return await get_user_use_case.execute(
        GetUserRequest(actor_id=actor_id, user_id=str(user_id))
    )


@router.patch("/{user_id}/role", response_model=UserItem)
async def update_user_role(
    user_id: UUID,
    request: UpdateRoleAPIRequest,
    actor_id: ActorId,
    update_user_role_use_case: FromDishka[UpdateUserRoleUseCase],
) -> UserItem:
    """Change a member's role."""
    return await update_user_role_use_case.execute(
        UpdateUserRoleRequest(
            actor_id=actor_id, user_id=str(user_id), role=request.role
        )
    )


@router.patch("/{user_id}/status", response_model=UserItem)
async def update_user_status(
    user_id: UUID,
    request: UpdateStatusAPIRequest,
    actor_id: ActorId,
    update_user_status_use_case: FromDishka[UpdateUserStatusUseCase],
) -> UserItem:
    """Activate, deactivate or lock a member."""
    return await update_user_status_use_case.execute(
        UpdateUserStatusRequest(
            actor_id=actor_id, user_id=str(user_id), status=request.status
        )
    )


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_user(
    user_id: UUID,
    actor_id: ActorId,
    remove_user_use_case: FromDishka[RemoveUserUseCase],
) -> Response:
    """Remove a member from the organization."""
    await remove_user_use_case.execute(
        RemoveUserRequest(actor_id=actor_id, user_id=str(user_id))
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
