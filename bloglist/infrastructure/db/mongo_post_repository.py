# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Post
from ...domain.constants import PostFields
from ...domain.exceptions import NotFoundError
from .mongo_connection import get_post_collection


def _to_object_id(post_id: Optional[str]) -> Optional[ObjectId]:
    """Parse a post ID, returning None for anything that is not an ObjectId"""
    if not post_id:
        return None
    try:
        return ObjectId(post_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""

    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()

    async def find_all(self) -> List[Post]:
        """
        List every post

        Returns:
            List of Post domain models in natural (insertion) order
        """
        try:
            cursor = self.post_collection.find({})
            posts = []
            async for document in cursor:
                posts.append(self._document_to_post(document))
            return posts
        except Exception as e:
            raise RuntimeError(f"Error listing posts: {str(e)}")

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """
        Find post by ID

        Args:
            post_id: The post ID to find

        Returns:
            Post domain model if found, None otherwise (including malformed IDs)
        """
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
            if document is None:
                return None
            return self._document_to_post(document)
        except Exception as e:
            raise RuntimeError(f"Error finding post by ID: {str(e)}")

    async def save(self, post: Post) -> Post:
        """
        Save post (create new or replace existing)

        Args:
            post: Post domain model to save

        Returns:
            Saved Post domain model with ID set

        Raises:
            NotFoundError: If the post has an ID that no longer exists
        """
        if not post:
            raise ValueError("Post cannot be None")

        post_dict = self._post_to_dict(post)

        try:
            if post.id:
                object_id = _to_object_id(post.id)
                if object_id is None:
                    raise NotFoundError("blog not found")

                # Owner is bound at creation; never rewrite it on update
                update_result = await self.post_collection.update_one(
                    {PostFields.MONGO_ID: object_id},
                    {"$set": {k: v for k, v in post_dict.items() if k != PostFields.OWNER_USER_ID}}
                )
                if update_result.matched_count == 0:
                    raise NotFoundError("blog not found")

                updated_document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
                if updated_document is None:
                    raise NotFoundError("blog not found")
                return self._document_to_post(updated_document)

            # Create new post
            result = await self.post_collection.insert_one(post_dict)

            new_document = await self.post_collection.find_one({PostFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise RuntimeError("Post was created but could not be retrieved")

            return self._document_to_post(new_document)
        except (NotFoundError, RuntimeError):
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving post: {str(e)}")

    async def delete(self, post_id: str) -> bool:
        """
        Delete post by ID

        Args:
            post_id: The post ID to delete

        Returns:
            True if a document was removed, False otherwise
        """
        object_id = _to_object_id(post_id)
        if object_id is None:
            return False

        try:
            result = await self.post_collection.delete_one({PostFields.MONGO_ID: object_id})
            return result.deleted_count > 0
        except Exception as e:
            raise RuntimeError(f"Error deleting post: {str(e)}")

    def _document_to_post(self, document: Dict[str, Any]) -> Post:
        """
        Convert MongoDB document to Post domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Post domain model
        """
        if not document or PostFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Post(
            id=str(document[PostFields.MONGO_ID]),
            title=document.get(PostFields.TITLE, ""),
            url=document.get(PostFields.URL, ""),
            author=document.get(PostFields.AUTHOR),
            likes=int(document.get(PostFields.LIKES) or 0),
            owner_user_id=document.get(PostFields.OWNER_USER_ID),
        )

    def _post_to_dict(self, post: Post) -> Dict[str, Any]:
        """
        Convert Post domain model to MongoDB document (without _id)

        Args:
            post: Post domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            PostFields.TITLE: post.title,
            PostFields.URL: post.url,
            PostFields.AUTHOR: post.author,
            PostFields.LIKES: post.likes,
            PostFields.OWNER_USER_ID: post.owner_user_id,
        }
