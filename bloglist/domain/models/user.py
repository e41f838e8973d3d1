from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    password_hash: str
    name: str = ""

    def __post_init__(self):
        """Business validations"""
        if not self.username:
            raise ValueError("Username is required")
        if not self.password_hash:
            raise ValueError("Password hash is required")
        if self.name is None:
            self.name = ""
