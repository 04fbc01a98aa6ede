"""Strongly typed identifiers for membership entities.

NewType keeps organization, user and invitation ids from being mixed up
at call sites while staying plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

OrganizationId = NewType("OrganizationId", UUID)
UserId = NewType("UserId", UUID)
InvitationId = NewType("InvitationId", UUID)
