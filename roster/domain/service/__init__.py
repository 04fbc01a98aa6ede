"""Domain services."""

from .admin_guard import can_remove_admin_status
from .base import Service
from .clock import Clock, FrozenClock, SystemClock
from .credentials import PasswordHasher
from .expiry_sweeper import ExpirySweeper
from .invitation_service import InvitationService
from .notification import InvitationNotice, InvitationNotifier
from .organization_service import OrganizationService
from .permission_service import PermissionService, can_manage
from .user_service import UserService

__all__ = [
    "Clock",
    "ExpirySweeper",
    "FrozenClock",
    "InvitationNotice",
    "InvitationNotifier",
    "InvitationService",
    "OrganizationService",
    "PasswordHasher",
    "PermissionService",
    "Service",
    "SystemClock",
    "UserService",
    "can_manage",
    "can_remove_admin_status",
]
