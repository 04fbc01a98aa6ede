"""Organization aggregate root.

The organization is the tenant boundary. Membership counts are never
derived from an in-memory collection of users; they are queried from the
user repository at decision time.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from roster.domain.model.common import DomainModel, utcnow
from roster.domain.value import OrganizationId


class Organization(DomainModel):
    """Organization entity. Names are unique across the system."""

    id: OrganizationId
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
