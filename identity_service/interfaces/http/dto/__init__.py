from .auth import LoginRequestDTO, MessageDTO, RegisterRequestDTO, TokenDTO
from .users import UpdateUserRequestDTO, UserDTO, UserUpdatedDTO

__all__ = [
    "LoginRequestDTO",
    "MessageDTO",
    "RegisterRequestDTO",
    "TokenDTO",
    "UpdateUserRequestDTO",
    "UserDTO",
    "UserUpdatedDTO",
]
