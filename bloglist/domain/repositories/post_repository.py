from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.post import Post


class PostRepository(ABC):
    """Repository interface - defines contract for blog post data access"""

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """List every post in insertion order"""
        pass

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID"""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save post (create when it has no ID, otherwise replace)"""
        pass

    @abstractmethod
    async def delete(self, post_id: str) -> bool:
        """Delete post by ID, returning whether a document was removed"""
        pass
