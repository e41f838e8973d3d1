from typing import TYPE_CHECKING
from ...domain.repositories.post_repository import PostRepository
from ...application.use_cases.stats.get_blog_statistics import GetBlogStatisticsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StatisticsProvider:
    """Statistics use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetBlogStatisticsUseCase,
            lambda: GetBlogStatisticsUseCase(
                post_repository=container.get(PostRepository)
            )
        )
