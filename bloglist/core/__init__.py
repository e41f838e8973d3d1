from .config import Settings, get_settings
from .security import (
    TokenService,
    hash_password,
    verify_password,
)

__all__ = [
    "Settings",
    "get_settings",
    "TokenService",
    "hash_password",
    "verify_password",
]
