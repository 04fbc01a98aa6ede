"""Organization routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from roster.application.usecase.organization import (
    CreateOrganizationRequest,
    CreateOrganizationResponse,
    CreateOrganizationUseCase,
)

router = APIRouter(
    prefix="/organizations", tags=["organizations"], route_class=DishkaRoute
)


@router.post(
    "",
    response_model=CreateOrganizationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_organization(
    request: CreateOrganizationRequest,
    create_organization_use_case: FromDishka[CreateOrganizationUseCase],
) -> CreateOrganizationResponse:
    """Create an organization together with its first administrator."""
    return await create_organization_use_case.execute(request)
