from .security_provider import SecurityProvider
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .post_provider import PostProvider
from .statistics_provider import StatisticsProvider


__all__ = [
    "SecurityProvider",
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "PostProvider",
    "StatisticsProvider",
]
