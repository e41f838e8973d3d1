# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.constants import UserFields
from ....domain.models.caller import ANONYMOUS, AuthenticatedCaller, Caller
from ....core.security import TokenService

logger = logging.getLogger(__name__)


class ResolveCallerUseCase:
    """
    Use case for deriving the caller identity from an optional bearer token.

    This never fails: a missing token, a token that does not verify and a
    verified token without an ``id`` claim all resolve to the anonymous
    caller. Routes that need an identity reject the anonymous caller
    themselves.
    """

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    def execute(self, token: Optional[str]) -> Caller:
        """
        Resolve the caller for a request

        Args:
            token: Raw bearer token, or None when the request carried none

        Returns:
            AuthenticatedCaller when the token verifies and names a user id,
            otherwise the anonymous caller
        """
        if not token:
            return ANONYMOUS

        try:
            payload = self.token_service.decode_token(token)
        except ValueError as e:
            logger.debug(f"Treating request as anonymous: {e}")
            return ANONYMOUS

        user_id = payload.get(UserFields.ID)
        if not user_id:
            logger.debug("Treating request as anonymous: token has no user id")
            return ANONYMOUS

        return AuthenticatedCaller(
            id=str(user_id),
            username=payload.get(UserFields.USERNAME),
        )
