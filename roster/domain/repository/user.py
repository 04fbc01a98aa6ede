"""User repository interface."""

from abc import ABC, abstractmethod

from roster.domain.model import User
from roster.domain.value import EmailAddress, OrganizationId, UserId, Username


class UserRepository(ABC):
    """Repository for User entity.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> User | None:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> User | None:
        """Find a user by username.

        Args:
            username: Globally unique login name

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email_in_organization(
        self, email: EmailAddress, organization_id: OrganizationId
    ) -> User | None:
        """Find a user by email within one organization.

        Args:
            email: Email address
            organization_id: Organization to search in

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_organization(self, organization_id: OrganizationId) -> list[User]:
        """List all users of an organization, ordered by creation time."""
        pass

    @abstractmethod
    async def count_admins(self, organization_id: OrganizationId) -> int:
        """Count the organization's effective administrators.

        An effective administrator holds ADMIN or UNPAID_ADMIN and is ACTIVE.

        Args:
            organization_id: Organization to count in

        Returns:
            Number of effective administrators
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            ConflictError: If the username or the (email, organization) pair is taken
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user.

        Args:
            user_id: The user's unique identifier
        """
        pass
