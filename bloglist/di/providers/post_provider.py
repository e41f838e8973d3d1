from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.post_repository import PostRepository
from ...domain.repositories.user_repository import UserRepository
from ...domain.policies.ownership import PostAuthorizationPolicy
from ...application.use_cases.post.create_post import CreatePostUseCase
from ...application.use_cases.post.list_posts import ListPostsUseCase
from ...application.use_cases.post.get_post import GetPostUseCase
from ...application.use_cases.post.update_post import UpdatePostUseCase
from ...application.use_cases.post.delete_post import DeletePostUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider - registers all blog-post use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all post use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CreatePostUseCase,
            lambda: CreatePostUseCase(
                post_repository=container.get(PostRepository),
                allow_anonymous=container.get(Settings).allow_anonymous_posts,
            )
        )

        container.register_factory(
            ListPostsUseCase,
            lambda: ListPostsUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
            )
        )

        container.register_factory(
            GetPostUseCase,
            lambda: GetPostUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
            )
        )

        container.register_factory(
            UpdatePostUseCase,
            lambda: UpdatePostUseCase(
                post_repository=container.get(PostRepository),
                authorization_policy=container.get(PostAuthorizationPolicy),
            )
        )

        container.register_factory(
            DeletePostUseCase,
            lambda: DeletePostUseCase(
                post_repository=container.get(PostRepository),
                authorization_policy=container.get(PostAuthorizationPolicy),
            )
        )
