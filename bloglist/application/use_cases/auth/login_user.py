# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....domain.exceptions import AuthenticationError
from ....core.security import TokenService, verify_password
from ...dto.auth_dto import UserLoginRequest, LoginResponse
from .register_user import MIN_CREDENTIAL_LENGTH

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating a JWT token"""

    def __init__(self, user_repository: UserRepository, token_service: TokenService) -> None:
        self.user_repository = user_repository
        self.token_service = token_service

    async def execute(self, request: UserLoginRequest) -> LoginResponse:
        """
        Authenticate user and generate access token

        Every failure raises the same AuthenticationError so that callers
        cannot tell an unknown username from a wrong password.

        Args:
            request: Login request with username and password

        Returns:
            LoginResponse with token, user id and username

        Raises:
            AuthenticationError: If the credentials are not valid
        """
        username = request.username or ""
        password = request.password or ""

        if len(username) <= MIN_CREDENTIAL_LENGTH or len(password) <= MIN_CREDENTIAL_LENGTH:
            logger.warning("Login rejected: credentials too short")
            raise AuthenticationError()

        user = await self.user_repository.find_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning(f"Login failed for username {username!r}")
            raise AuthenticationError()

        token = self.token_service.create_token({
            UserFields.USERNAME: user.username,
            UserFields.ID: user.id or "",
        })
        logger.info(f"User {user.username} logged in")

        return LoginResponse(token=token, id=user.id or "", username=user.username)
