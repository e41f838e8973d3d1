# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ..exceptions import ValidationError


@dataclass
class Post:
    """
    Pure domain model for a blog post - no external dependencies.

    ``owner_user_id`` is bound once at creation and never changes
    afterwards; it is ``None`` only for posts created anonymously.
    """
    id: Optional[str]
    title: str
    url: str
    author: Optional[str] = None
    likes: int = 0
    owner_user_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.title:
            raise ValidationError("title is required")
        if not self.url:
            raise ValidationError("url is required")
        if self.likes is None:
            self.likes = 0
        if isinstance(self.likes, bool) or not isinstance(self.likes, int):
            raise ValidationError("likes must be an integer")
        if self.likes < 0:
            raise ValidationError("likes cannot be negative")

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        """True only for a post with an owner that matches ``user_id``"""
        return self.owner_user_id is not None and self.owner_user_id == user_id
