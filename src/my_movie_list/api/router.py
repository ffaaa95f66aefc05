"""Main API router aggregation."""

from fastapi import APIRouter

from my_movie_list.api.auth import router as auth_router
from my_movie_list.api.titles import router as titles_router
from my_movie_list.api.users import router as users_router
from my_movie_list.api.watchlists import router as watchlists_router

# Main API router
api_router = APIRouter(prefix="/api")

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(watchlists_router)
api_router.include_router(titles_router)
