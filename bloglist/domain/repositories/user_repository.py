from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        """Find all users whose ID is in ``user_ids`` (unknown IDs are skipped)"""
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """List every registered user"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a newly registered user and return it with its generated ID"""
        pass
