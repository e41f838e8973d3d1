from .get_blog_statistics import GetBlogStatisticsUseCase

__all__ = ["GetBlogStatisticsUseCase"]
