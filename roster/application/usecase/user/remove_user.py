"""Remove user use case."""

from uuid import UUID

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.domain.service import UserService
from roster.domain.value import UserId


class RemoveUserRequest(BaseModel):
    """Remove user request."""

    actor_id: str
    user_id: str


class RemoveUserUseCase(BaseUseCase[RemoveUserRequest, None]):
    """Use case for removing a member from the organization."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: RemoveUserRequest) -> None:
        """Execute removal.

        Raises:
            NotFoundError: If the target does not exist
            UnauthorizedError: If the actor may not remove the target
            InvalidOperationError: If the target is the last administrator
        """
        actor = await self.user_service.get_actor(UserId(UUID(request.actor_id)))
        await self.user_service.remove_user(actor, UserId(UUID(request.user_id)))
