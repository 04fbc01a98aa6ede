"""Organization use cases."""

from .create_organization import (
    CreateOrganizationRequest,
    CreateOrganizationResponse,
    CreateOrganizationUseCase,
    OrganizationItem,
)

__all__ = [
    "CreateOrganizationRequest",
    "CreateOrganizationResponse",
    "CreateOrganizationUseCase",
    "OrganizationItem",
]
