from fastapi import APIRouter

from repo_stats.api.v1 import repository_stats

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(repository_stats.router)
