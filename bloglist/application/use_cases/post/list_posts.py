# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.post_dto import PostResponse
from .post_mapper import to_post_response


class ListPostsUseCase:
    """Use case for listing every post, joined with a reduced owner projection"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def execute(self) -> List[PostResponse]:
        """
        List all posts

        Returns:
            List of PostResponse objects; ``owner`` is None for posts
            without an owner or whose owner no longer resolves
        """
        posts = await self.post_repository.find_all()

        owner_ids = {post.owner_user_id for post in posts if post.owner_user_id}
        owners = {}
        if owner_ids:
            owners = {user.id: user for user in await self.user_repository.find_by_ids(owner_ids)}

        return [to_post_response(post, owners.get(post.owner_user_id)) for post in posts]
