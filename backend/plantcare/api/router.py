"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from plantcare.api.routes import events, plants, posts, users
from plantcare.core.config import get_settings

api_router = APIRouter(prefix=get_settings().API_PREFIX)
api_router.include_router(users.router)
api_router.include_router(plants.router)
api_router.include_router(events.router)
api_router.include_router(posts.router)
