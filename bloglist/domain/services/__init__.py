from .statistics import (
    AuthorTally,
    FavoriteBlog,
    count_blogs_by_author,
    favorite_blog,
    most_blogs,
    total_likes,
)

__all__ = [
    "AuthorTally",
    "FavoriteBlog",
    "count_blogs_by_author",
    "favorite_blog",
    "most_blogs",
    "total_likes",
]
