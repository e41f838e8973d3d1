from typing import Optional
from pydantic import BaseModel


class UserRegistrationRequest(BaseModel):
    """
    DTO for user registration request.

    Fields are optional at this layer so that a missing value reaches the
    use case and produces its specific error message.
    """
    username: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = None


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    """DTO for a successful login"""
    token: str
    id: str
    username: str
