"""
Blog statistics.

Pure reductions over an in-memory sequence of posts. Nothing here performs
I/O or mutates its input. Ties always go to the first post (or author)
encountered, since every comparison is strictly greater-than.
"""

# Standard library imports
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

# Local application imports
from ..models.post import Post


@dataclass(frozen=True)
class FavoriteBlog:
    """The most-liked post, reduced to the fields worth reporting"""
    title: str
    author: Optional[str]
    likes: int


@dataclass(frozen=True)
class AuthorTally:
    """An author and the number of posts attributed to them"""
    author: Optional[str]
    blogs: int


def total_likes(posts: Iterable[Post]) -> int:
    """Sum of likes over all posts, 0 for an empty collection"""
    return sum(post.likes for post in posts)


def favorite_blog(posts: Iterable[Post]) -> Optional[FavoriteBlog]:
    """
    Find the post with the most likes.

    Args:
        posts: Posts to scan

    Returns:
        FavoriteBlog for the first post holding the maximum, or None if
        there are no posts
    """
    top: Optional[Post] = None
    for post in posts:
        if top is None or post.likes > top.likes:
            top = post

    if top is None:
        return None
    return FavoriteBlog(title=top.title, author=top.author, likes=top.likes)


def count_blogs_by_author(posts: Iterable[Post]) -> Dict[Optional[str], int]:
    """Group posts by exact author value, preserving first-seen order"""
    counts: Dict[Optional[str], int] = {}
    for post in posts:
        counts[post.author] = counts.get(post.author, 0) + 1
    return counts


def most_blogs(posts: Iterable[Post]) -> Optional[AuthorTally]:
    """
    Find the author with the most posts.

    Authors are compared as-is: no case folding or whitespace trimming.

    Args:
        posts: Posts to scan

    Returns:
        AuthorTally for the first author holding the maximum, or None if
        there are no posts
    """
    top: Optional[AuthorTally] = None
    for author, blogs in count_blogs_by_author(posts).items():
        if top is None or blogs > top.blogs:
            top = AuthorTally(author=author, blogs=blogs)
    return top
