from .user import User
from .post import Post
from .caller import ANONYMOUS, AnonymousCaller, AuthenticatedCaller, Caller

__all__ = ["User", "Post", "Caller", "AuthenticatedCaller", "AnonymousCaller", "ANONYMOUS"]
