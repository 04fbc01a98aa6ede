"""User use cases."""

from .create_user import CreateUserRequest, CreateUserUseCase
from .get_user import GetUserRequest, GetUserUseCase
from .item import UserItem
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .remove_user import RemoveUserRequest, RemoveUserUseCase
from .update_user_role import UpdateUserRoleRequest, UpdateUserRoleUseCase
from .update_user_status import UpdateUserStatusRequest, UpdateUserStatusUseCase

__all__ = [
    "CreateUserRequest",
    "CreateUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "RemoveUserRequest",
    "RemoveUserUseCase",
    "UpdateUserRoleRequest",
    "UpdateUserRoleUseCase",
    "UpdateUserStatusRequest",
    "UpdateUserStatusUseCase",
    "UserItem",
]
