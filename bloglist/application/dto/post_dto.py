from typing import Optional
from pydantic import BaseModel, Field

from .user_dto import OwnerSummary


class PostCreateRequest(BaseModel):
    """DTO for post creation request"""
    title: Optional[str] = None
    url: Optional[str] = None
    author: Optional[str] = None
    likes: Optional[int] = Field(default=None, ge=0)


class PostUpdateRequest(BaseModel):
    """DTO for a partial post update; only title and likes can change"""
    title: Optional[str] = None
    likes: Optional[int] = Field(default=None, ge=0)


class PostResponse(BaseModel):
    """DTO for post response"""
    id: str
    title: str
    url: str
    author: Optional[str] = None
    likes: int = 0
    owner_user_id: Optional[str] = None
    owner: Optional[OwnerSummary] = None
