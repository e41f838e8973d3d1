# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database(settings: Optional[Settings] = None) -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    The client connects lazily, so this does not block or fail when the
    server is unreachable; the first query does.

    Args:
        settings: Settings to connect with; defaults to the global settings.
            Only used when the client is first created.

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = settings or get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    logger.info(f"MongoDB client created for database {settings.mongo_database_name!r}")
    return _mongo_database


def close_database() -> None:
    """Close the MongoDB client if one was created"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB client closed")
    _mongo_client = None
    _mongo_database = None


def get_user_collection(database: Optional[AsyncIOMotorDatabase] = None) -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Args:
        database: Database to read from; defaults to ``get_database()``

    Returns:
        MongoDB collection for users
    """
    database = database if database is not None else get_database()
    return database["users"]


def get_post_collection(database: Optional[AsyncIOMotorDatabase] = None) -> AsyncIOMotorCollection:
    """
    Get blog posts collection from MongoDB

    Args:
        database: Database to read from; defaults to ``get_database()``

    Returns:
        MongoDB collection for blog posts
    """
    database = database if database is not None else get_database()
    return database["blogs"]
