# Standard library imports
import time
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError


def hash_password(plain_password: str, rounds: int = 10) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt cost factor

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed stored hash
        return False


class TokenService:
    """
    Signs and verifies access tokens.

    The signing secret is passed in at construction so that callers never
    reach for process-wide configuration.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 0,
    ) -> None:
        if not secret_key:
            raise ValueError("Token secret key is required")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def create_token(self, payload: Dict[str, Any]) -> str:
        """
        Create a signed JWT token

        Args:
            payload: Dictionary containing token claims (e.g., id, username)

        Returns:
            Encoded JWT token string
        """
        issued_at = int(time.time())
        token_payload = {**payload, "iat": issued_at}
        if self.expire_minutes > 0:
            token_payload["exp"] = issued_at + (self.expire_minutes * 60)

        return jwt.encode(token_payload, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Decode and validate a JWT token

        Args:
            token: The JWT token string to decode

        Returns:
            Dictionary containing decoded token claims

        Raises:
            ValueError: If token is invalid, tampered with or expired
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")
