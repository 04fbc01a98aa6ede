"""Unit tests for OrganizationService."""

from uuid import uuid4

import pytest

from roster.domain.error import InvalidOperationError, NotFoundError
from roster.domain.repository import OrganizationRepository, UserRepository
from roster.domain.service import OrganizationService
from roster.domain.value import EmailAddress, OrganizationId, Username, UserRole
from tests.conftest import seed_organization, seed_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _create(service, name="Acme", username="founder", email="f@acme.io"):
    return await service.create_organization(
        name=name,
        description="Anvils and rockets",
        admin_username=Username(username),
        admin_email=EmailAddress(email),
        admin_first_name="Wile",
        admin_last_name="Coyote",
        admin_password="secret",
    )


class TestCreateOrganization:
    """Tests for create_organization."""

    @pytest.mark.asyncio
    async def test_creates_organization_with_admin(self, unit_env):
        # Arrange
        service = await unit_env.get(OrganizationService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        organization, admin = await _create(service)

        # Assert
        assert organization.name == "Acme"
        assert admin.role is UserRole.ADMIN
        assert admin.organization_id == organization.id
        assert await user_repo.count_admins(organization.id) == 1

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, unit_env):
        service = await unit_env.get(OrganizationService)
        await seed_organization(unit_env, "Acme")

        with pytest.raises(InvalidOperationError):
            await _create(service)

    @pytest.mark.asyncio
    async def test_failed_admin_registration_rolls_back_organization(self, unit_env):
        """No organization exists without its first administrator."""
        # Arrange
        service = await unit_env.get(OrganizationService)
        org_repo = await unit_env.get(OrganizationRepository)
        other = await seed_organization(unit_env, "Globex")
        await seed_user(unit_env, other, "founder")

        # Act
        with pytest.raises(InvalidOperationError):
            await _create(service, username="founder")

        # Assert
        assert await org_repo.find_by_name("Acme") is None


class TestGetById:
    """Tests for get_by_id."""

    @pytest.mark.asyncio
    async def test_missing_organization(self, unit_env):
        service = await unit_env.get(OrganizationService)

        with pytest.raises(NotFoundError):
            await service.get_by_id(OrganizationId(uuid4()))
