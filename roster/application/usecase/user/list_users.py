"""List users use case."""

from uuid import UUID

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.user.item import UserItem
from roster.domain.service import UserService
from roster.domain.value import UserId


class ListUsersRequest(BaseModel):
    """List users request."""

    actor_id: str


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserItem]
    total: int


class ListUsersUseCase(BaseUseCase[ListUsersRequest, ListUsersResponse]):
    """Use case for listing the members of the actor's organization."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        actor = await self.user_service.get_actor(UserId(UUID(request.actor_id)))
        users = await self.user_service.list_users(actor)
        items = [UserItem.from_user(user) for user in users]
        return ListUsersResponse(users=items, total=len(items))
