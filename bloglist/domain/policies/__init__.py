from .ownership import PostAuthorizationPolicy, PostOperation, ResourceState
from .mutation import merge_post_update

__all__ = [
    "PostAuthorizationPolicy",
    "PostOperation",
    "ResourceState",
    "merge_post_update",
]
