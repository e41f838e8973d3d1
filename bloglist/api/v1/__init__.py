from .users_controller import router as users_router
from .blogs_controller import router as blogs_router
from .stats_controller import router as stats_router


__all__ = ["users_router", "blogs_router", "stats_router"]
