from .auth_controller import AuthController
from .misc_controller import MiscController
from .users_controller import UsersController, parse_user_id

__all__ = ["AuthController", "MiscController", "UsersController", "parse_user_id"]
