# Standard library imports
import os
from typing import Final, List, Optional


def _env_flag(name: str, default: str = "false") -> bool:
    """Read a boolean flag from the environment ("1", "true", "yes" are truthy)"""
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes"}


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "bloglist")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("SECRET", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        # 0 disables the "exp" claim entirely
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )
        self.password_hash_rounds: Final[int] = int(os.getenv("PASSWORD_HASH_ROUNDS", "10"))

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")

        # HTTP
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ALLOW_ORIGINS",
                "http://localhost:3000,http://localhost:5173",
            ).split(",")
            if origin.strip()
        ]

        # Post authorization policy
        self.require_owner_for_update: Final[bool] = _env_flag("REQUIRE_OWNER_FOR_UPDATE")
        self.allow_anonymous_posts: Final[bool] = _env_flag("ALLOW_ANONYMOUS_POSTS")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
