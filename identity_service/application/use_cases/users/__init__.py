from .delete_user import DeleteUserUseCase
from .list_users import ListUsersUseCase
from .login_user import LoginUserUseCase
from .register_user import RegisterUserUseCase
from .update_user import UpdateUserUseCase

__all__ = [
    "DeleteUserUseCase",
    "ListUsersUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "UpdateUserUseCase",
]
