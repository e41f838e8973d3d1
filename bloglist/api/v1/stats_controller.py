# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.stats_dto import BlogStatisticsResponse
from ...application.use_cases.stats.get_blog_statistics import GetBlogStatisticsUseCase
from ...di.container import get_container


router = APIRouter(tags=["stats"])


@router.get("", response_model=BlogStatisticsResponse)
async def get_blog_statistics() -> BlogStatisticsResponse:
    """
    Total likes, most-liked post and most prolific author across all posts

    Returns:
        BlogStatisticsResponse; favorite_blog and most_blogs are null when
        there are no posts
    """
    container = get_container()
    statistics_use_case = container.get(GetBlogStatisticsUseCase)
    return await statistics_use_case.execute()
