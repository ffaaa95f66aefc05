"""HTTP API routers."""

from my_movie_list.api.router import api_router

__all__ = ["api_router"]
