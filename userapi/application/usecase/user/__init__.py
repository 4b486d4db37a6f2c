"""User use cases."""

from .authenticate import AuthenticateUseCase
from .delete_user import DeleteUserUseCase
from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase
from .register import RegisterUseCase
from .update_user import UpdateUserUseCase

__all__ = [
    "AuthenticateUseCase",
    "DeleteUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "RegisterUseCase",
    "UpdateUserUseCase",
]
