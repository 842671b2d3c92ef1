from .auth_gateway import AuthGateway, extract_token
from .password_hashing import WerkzeugPasswordHasher
from .tokens import TOKEN_TTL, JwtTokenService

__all__ = [
    "AuthGateway",
    "JwtTokenService",
    "TOKEN_TTL",
    "WerkzeugPasswordHasher",
    "extract_token",
]
