from pydantic import BaseModel


class UserResponse(BaseModel):
    """DTO for user response (no password hash)"""
    id: str
    username: str
    name: str = ""


class OwnerSummary(BaseModel):
    """Reduced owner projection joined onto listed posts"""
    username: str
    name: str = ""
