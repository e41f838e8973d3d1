# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.caller import AuthenticatedCaller, Caller
from ....domain.models.post import Post
from ....domain.exceptions import AuthorizationError
from ...dto.post_dto import PostCreateRequest, PostResponse
from .post_mapper import to_post_response

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for creating a new blog post owned by the caller"""

    def __init__(self, post_repository: PostRepository, allow_anonymous: bool = False) -> None:
        self.post_repository = post_repository
        self.allow_anonymous = allow_anonymous

    async def execute(self, request: PostCreateRequest, caller: Caller) -> PostResponse:
        """
        Create a new post

        Args:
            request: Post creation request
            caller: Resolved caller identity; becomes the post owner

        Returns:
            PostResponse with the generated id and owner

        Raises:
            ValidationError: If title or url is missing
            AuthorizationError: If the caller is anonymous and anonymous
                posting is disabled
        """
        if isinstance(caller, AuthenticatedCaller):
            owner_user_id = caller.id
        elif self.allow_anonymous:
            owner_user_id = None
        else:
            raise AuthorizationError("token missing or invalid")

        # Domain model validates title and url
        new_post = Post(
            id=None,
            title=request.title or "",
            url=request.url or "",
            author=request.author,
            likes=request.likes if request.likes is not None else 0,
            owner_user_id=owner_user_id,
        )

        saved_post = await self.post_repository.save(new_post)
        logger.info(f"Created post {saved_post.id} owned by {owner_user_id or 'nobody'}")

        return to_post_response(saved_post)
