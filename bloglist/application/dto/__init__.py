from .auth_dto import UserRegistrationRequest, UserLoginRequest, LoginResponse
from .user_dto import UserResponse, OwnerSummary
from .post_dto import PostCreateRequest, PostUpdateRequest, PostResponse
from .stats_dto import FavoriteBlogResponse, MostBlogsResponse, BlogStatisticsResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "LoginResponse",
    "UserResponse",
    "OwnerSummary",
    "PostCreateRequest",
    "PostUpdateRequest",
    "PostResponse",
    "FavoriteBlogResponse",
    "MostBlogsResponse",
    "BlogStatisticsResponse",
]
