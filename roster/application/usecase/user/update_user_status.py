"""Update user status use case."""

from uuid import UUID

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.user.item import UserItem
from roster.domain.service import UserService
from roster.domain.value import UserId, UserStatus


class UpdateUserStatusRequest(BaseModel):
    """Update user status request."""

    actor_id: str
    user_id: str
    status: UserStatus


class UpdateUserStatusUseCase(BaseUseCase[UpdateUserStatusRequest, UserItem]):
    """Use case for activating, deactivating or locking a member."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateUserStatusRequest) -> UserItem:
        actor = await self.user_service.get_actor(UserId(UUID(request.actor_id)))
        user = await self.user_service.change_status(
            actor, UserId(UUID(request.user_id)), request.status
        )
        return UserItem.from_user(user)
