# Standard library imports
from dataclasses import replace
from typing import Optional

# Local application imports
from ..models.post import Post


def merge_post_update(post: Post, title: Optional[str] = None, likes: Optional[int] = None) -> Post:
    """
    Apply a partial update onto an existing post.

    Only title and likes are mutable; a field left as None keeps its
    current value. url, author, owner and id are carried over untouched.
    The input post is not modified.

    Args:
        post: The post as currently stored
        title: New title, or None to keep the current one
        likes: New like count, or None to keep the current one

    Returns:
        A new, fully populated Post
    """
    return replace(
        post,
        title=title if title is not None else post.title,
        likes=likes if likes is not None else post.likes,
    )
