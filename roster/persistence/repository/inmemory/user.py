"""In-memory user repository for testing."""

from typing import Optional

from roster.domain.error import ConflictError
from roster.domain.model import User
from roster.domain.repository import UserRepository
from roster.domain.value import EmailAddress, OrganizationId, UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces the same uniqueness rules as the database schema.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    def snapshot(self) -> dict[UserId, User]:
        return dict(self._users)

    def restore(self, state: dict[UserId, User]) -> None:
        self._users = dict(state)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_email_in_organization(
        self, email: EmailAddress, organization_id: OrganizationId
    ) -> Optional[User]:
        """Find a user by email within one organization."""
        for user in self._users.values():
            if user.email == email and user.organization_id == organization_id:
                return user
        return None

    async def find_by_organization(self, organization_id: OrganizationId) -> list[User]:
        """List users of an organization, oldest first."""
        users = [
            user
            for user in self._users.values()
            if user.organization_id == organization_id
        ]
        users.sort(key=lambda user: user.created_at)
        return users

    async def count_admins(self, organization_id: OrganizationId) -> int:
        """Count ACTIVE users holding ADMIN or UNPAID_ADMIN."""
        return sum(
            1
            for user in self._users.values()
            if user.organization_id == organization_id
            and user.is_administrator
            and user.is_active
        )

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            ConflictError: If the username or the (email, organization) pair is taken
        """
        for other in self._users.values():
            if other.id == user.id:
                continue
            if other.username == user.username:
                raise ConflictError(f"Duplicate username: {user.username.root}")
            if (
                other.email == user.email
                and other.organization_id == user.organization_id
            ):
                raise ConflictError("Duplicate email in organization")

        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user."""
        self._users.pop(user_id, None)
