"""Get user use case."""

from uuid import UUID

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.user.item import UserItem
from roster.domain.service import UserService
from roster.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user request."""

    actor_id: str
    user_id: str


class GetUserUseCase(BaseUseCase[GetUserRequest, UserItem]):
    """Use case for reading one member of the actor's organization."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserItem:
        """Execute lookup.

        Raises:
            NotFoundError: If the user does not exist
            UnauthorizedError: If the user belongs to another organization
        """
        actor = await self.user_service.get_actor(UserId(UUID(request.actor_id)))
        user = await self.user_service.get_user(actor, UserId(UUID(request.user_id)))
        return UserItem.from_user(user)
