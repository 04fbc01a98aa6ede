"""Unit tests for CreateOrganizationUseCase."""

import pytest

from roster.application.usecase.organization import (
    CreateOrganizationRequest,
    CreateOrganizationUseCase,
)
from roster.domain.error import InvalidOperationError
from roster.domain.value import UserRole
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _request(name: str = "Acme", username: str = "founder") -> CreateOrganizationRequest:
    return CreateOrganizationRequest(
        name=name,
        description="Anvils and rockets",
        admin_username=username,
        admin_email=f"{username}@acme.io",
        admin_first_name="Wile",
        admin_last_name="Coyote",
        admin_password="secret",
    )


class TestCreateOrganizationUseCase:
    """Tests for CreateOrganizationUseCase."""

    @pytest.mark.asyncio
    async def test_bootstrap(self, unit_env):
        use_case = await unit_env.get(CreateOrganizationUseCase)

        response = await use_case.execute(_request())

        assert response.organization.name == "Acme"
        assert response.admin.role is UserRole.ADMIN
        assert response.admin.organization_id == response.organization.organization_id

    @pytest.mark.asyncio
    async def test_name_taken(self, unit_env):
        use_case = await unit_env.get(CreateOrganizationUseCase)
        await use_case.execute(_request())

        with pytest.raises(InvalidOperationError):
            await use_case.execute(_request(username="other"))
