# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.caller import Caller
from ....domain.policies.ownership import PostAuthorizationPolicy, PostOperation

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for deleting a post; only its owner may do so"""

    def __init__(self, post_repository: PostRepository, authorization_policy: PostAuthorizationPolicy) -> None:
        self.post_repository = post_repository
        self.authorization_policy = authorization_policy

    async def execute(self, post_id: str, caller: Caller) -> None:
        """
        Delete a post

        Args:
            post_id: ID of the post to delete
            caller: Resolved caller identity

        Raises:
            AuthorizationError: If the caller is not the owner, including
                when the post does not exist
        """
        current = await self.post_repository.find_by_id(post_id)
        self.authorization_policy.authorize(PostOperation.DELETE, current, caller)

        await self.post_repository.delete(post_id)
        logger.info(f"Deleted post {post_id}")
