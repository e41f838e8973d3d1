# Standard library imports
from typing import Optional

# Local application imports
from ....domain.models.post import Post
from ....domain.models.user import User
from ...dto.post_dto import PostResponse
from ...dto.user_dto import OwnerSummary


def to_post_response(post: Post, owner: Optional[User] = None) -> PostResponse:
    """Convert a Post domain model to its DTO, optionally joined with its owner"""
    return PostResponse(
        id=post.id or "",
        title=post.title,
        url=post.url,
        author=post.author,
        likes=post.likes,
        owner_user_id=post.owner_user_id,
        owner=OwnerSummary(username=owner.username, name=owner.name) if owner else None,
    )
