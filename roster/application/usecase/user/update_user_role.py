"""Update user role use case."""

from uuid import UUID

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.user.item import UserItem
from roster.domain.service import UserService
from roster.domain.value import UserId, UserRole


class UpdateUserRoleRequest(BaseModel):
    """Update user role request."""

    actor_id: str
    user_id: str
    role: UserRole


class UpdateUserRoleUseCase(BaseUseCase[UpdateUserRoleRequest, UserItem]):
    """Use case for changing a member's role."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateUserRoleRequest) -> UserItem:
        """Execute role change.

        Raises:
            NotFoundError: If the target does not exist
            UnauthorizedError: If the actor may not make this change
            InvalidOperationError: If the target is the last administrator
        """
        actor = await self.user_service.get_actor(UserId(UUID(request.actor_id)))
        user = await self.user_service.change_role(
            actor, UserId(UUID(request.user_id)), request.role
        )
        return UserItem.from_user(user)
