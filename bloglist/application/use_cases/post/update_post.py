# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.caller import Caller
from ....domain.policies.ownership import PostAuthorizationPolicy, PostOperation
from ....domain.policies.mutation import merge_post_update
from ...dto.post_dto import PostUpdateRequest, PostResponse
from .post_mapper import to_post_response

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """Use case for partially updating a post's title and/or likes"""

    def __init__(self, post_repository: PostRepository, authorization_policy: PostAuthorizationPolicy) -> None:
        self.post_repository = post_repository
        self.authorization_policy = authorization_policy

    async def execute(self, post_id: str, request: PostUpdateRequest, caller: Caller) -> PostResponse:
        """
        Update a post

        The merged post is computed before it is written, so fields left
        out of the payload keep their stored values.

        Args:
            post_id: ID of the post to update
            request: Partial update payload
            caller: Resolved caller identity

        Returns:
            PostResponse with the merged post

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If owner-only updates are enabled and the
                caller is not the owner
            ValidationError: If the payload would blank the title
        """
        current = await self.post_repository.find_by_id(post_id)
        self.authorization_policy.authorize(PostOperation.UPDATE, current, caller)

        merged = merge_post_update(current, title=request.title, likes=request.likes)
        saved_post = await self.post_repository.save(merged)
        logger.info(f"Updated post {saved_post.id}")

        return to_post_response(saved_post)
