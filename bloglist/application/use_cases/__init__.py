from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    ResolveCallerUseCase,
    ListUsersUseCase,
)
from .post import (
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
)
from .stats import GetBlogStatisticsUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "ResolveCallerUseCase",
    "ListUsersUseCase",
    "CreatePostUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "GetBlogStatisticsUseCase",
]
