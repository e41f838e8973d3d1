# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.services.statistics import favorite_blog, most_blogs, total_likes
from ...dto.stats_dto import BlogStatisticsResponse, FavoriteBlogResponse, MostBlogsResponse


class GetBlogStatisticsUseCase:
    """Use case for computing blog statistics over every stored post"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self) -> BlogStatisticsResponse:
        # Fetch once; the aggregations are pure and run on the same snapshot
        posts = await self.post_repository.find_all()

        favorite = favorite_blog(posts)
        top_author = most_blogs(posts)

        return BlogStatisticsResponse(
            total_likes=total_likes(posts),
            favorite_blog=(
                FavoriteBlogResponse(title=favorite.title, author=favorite.author, likes=favorite.likes)
                if favorite else None
            ),
            most_blogs=(
                MostBlogsResponse(author=top_author.author, blogs=top_author.blogs)
                if top_author else None
            ),
        )
