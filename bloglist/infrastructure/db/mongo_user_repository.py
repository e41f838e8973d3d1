# Standard library imports
from typing import Iterable, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by username

        Args:
            username: Exact username to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by username: {str(e)}")

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")

    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        """
        Find all users whose ID is in ``user_ids``

        Args:
            user_ids: User IDs to look up; malformed IDs are ignored

        Returns:
            List of User domain models (order not guaranteed)
        """
        object_ids = []
        for user_id in user_ids:
            try:
                object_ids.append(ObjectId(user_id))
            except (InvalidId, ValueError, TypeError):
                continue

        if not object_ids:
            return []

        try:
            cursor = self.user_collection.find({UserFields.MONGO_ID: {"$in": object_ids}})
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except Exception as e:
            raise RuntimeError(f"Error finding users by IDs: {str(e)}")

    async def find_all(self) -> List[User]:
        """
        List every registered user

        Returns:
            List of User domain models
        """
        try:
            cursor = self.user_collection.find({})
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except Exception as e:
            raise RuntimeError(f"Error listing users: {str(e)}")

    async def save(self, user: User) -> User:
        """
        Insert a newly registered user

        Users are never modified after registration, so this only inserts.

        Args:
            user: User domain model to insert (its id is ignored)

        Returns:
            Saved User domain model with the generated ID set
        """
        if not user:
            raise ValueError("User cannot be None")

        try:
            result = await self.user_collection.insert_one(self._user_to_dict(user))

            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise RuntimeError("User was created but could not be retrieved")

            return self._document_to_user(new_document)
        except RuntimeError:
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            name=document.get(UserFields.NAME) or "",
            password_hash=document.get(UserFields.PASSWORD_HASH, ""),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without _id)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.USERNAME: user.username,
            UserFields.NAME: user.name,
            UserFields.PASSWORD_HASH: user.password_hash,
        }
