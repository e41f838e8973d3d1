from .mongo_connection import close_database, get_database, get_user_collection, get_post_collection
from .mongo_user_repository import MongoUserRepository
from .mongo_post_repository import MongoPostRepository

__all__ = [
    "close_database",
    "get_database",
    "get_user_collection",
    "get_post_collection",
    "MongoUserRepository",
    "MongoPostRepository",
]
