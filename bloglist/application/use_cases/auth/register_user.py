# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import ConflictError, ValidationError
from ....core.security import hash_password
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)

# Usernames and passwords must be strictly longer than this
MIN_CREDENTIAL_LENGTH = 3


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository, password_hash_rounds: int = 10) -> None:
        self.user_repository = user_repository
        self.password_hash_rounds = password_hash_rounds

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with created user information

        Raises:
            ValidationError: If username or password is missing or too short
            ConflictError: If the username is already taken
        """
        if not request.username:
            raise ValidationError("no username provided")
        if not request.password:
            raise ValidationError("no password provided")

        if len(request.username) <= MIN_CREDENTIAL_LENGTH:
            raise ValidationError("username should be at least 4 characters long")
        if len(request.password) <= MIN_CREDENTIAL_LENGTH:
            raise ValidationError("password should be at least 4 characters long")

        # Check if user already exists
        existing_user = await self.user_repository.find_by_username(request.username)
        if existing_user is not None:
            raise ConflictError("a user with that username already exists")

        new_user = User(
            id=None,  # Will be set by repository
            username=request.username,
            name=request.name or "",
            password_hash=hash_password(request.password, rounds=self.password_hash_rounds),
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.username} ({saved_user.id})")

        return UserResponse(
            id=saved_user.id or "",
            username=saved_user.username,
            name=saved_user.name,
        )
