"""User item shared by use case responses."""

from datetime import datetime

from pydantic import BaseModel

from roster.domain.model import User
from roster.domain.value import UserRole, UserStatus


class UserItem(BaseModel):
    """User as exposed to callers. Never carries the password hash."""

    user_id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: UserRole
    status: UserStatus
    organization_id: str
    created_at: datetime
    updated_at: datetime
    last_login_at: datetime | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserItem":
        return cls(
            user_id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            status=user.status,
            organization_id=str(user.organization_id),
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login_at=user.last_login_at,
        )
