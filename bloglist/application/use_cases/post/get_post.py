# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.post_dto import PostResponse
from .post_mapper import to_post_response


class GetPostUseCase:
    """Use case for reading a single post by ID"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def execute(self, post_id: str) -> PostResponse:
        """
        Get a post by ID

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("blog not found")

        owner = None
        if post.owner_user_id:
            owner = await self.user_repository.find_by_id(post.owner_user_id)

        return to_post_response(post, owner)
