from typing import Optional
from pydantic import BaseModel


class FavoriteBlogResponse(BaseModel):
    """DTO for the most-liked post"""
    title: str
    author: Optional[str] = None
    likes: int


class MostBlogsResponse(BaseModel):
    """DTO for the most prolific author"""
    author: Optional[str] = None
    blogs: int


class BlogStatisticsResponse(BaseModel):
    """DTO bundling every blog statistic; the optional parts are null when there are no posts"""
    total_likes: int
    favorite_blog: Optional[FavoriteBlogResponse] = None
    most_blogs: Optional[MostBlogsResponse] = None
