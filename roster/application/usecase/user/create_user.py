"""Create user use case (administrative creation, no invitation)."""

from uuid import UUID

from pydantic import BaseModel, Field

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.user.item import UserItem
from roster.domain.service import UserService
from roster.domain.value import EmailAddress, UserId, Username, UserRole


class CreateUserRequest(BaseModel):
    """Create user request."""

    actor_id: str
    username: str
    email: str
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    password: str = Field(repr=False)
    role: UserRole = UserRole.MEMBER


class CreateUserUseCase(BaseUseCase[CreateUserRequest, UserItem]):
    """Use case for an administrator creating a user directly."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> UserItem:
        """Execute create user flow.

        Raises:
            UnauthorizedError: If the actor may not create this user
            InvalidOperationError: If registration rules are violated
        """
        actor = await self.user_service.get_actor(UserId(UUID(request.actor_id)))
        user = await self.user_service.create_user(
            actor=actor,
            username=Username(request.username),
            email=EmailAddress(request.email),
            first_name=request.first_name,
            last_name=request.last_name,
            password=request.password,
            role=request.role,
        )
        return UserItem.from_user(user)
