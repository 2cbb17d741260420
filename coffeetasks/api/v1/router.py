"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from coffeetasks.api.v1.dependencies.
"""

from fastapi import APIRouter

from coffeetasks.api.v1.endpoints import (
    accounts,
    coffeeshops,
    health,
    jobs,
    me,
    task_results,
    tasks,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(me.router, prefix="/me", tags=["profile"])
api_router.include_router(accounts.router, prefix="/accounts", tags=["accounts"])
api_router.include_router(
    coffeeshops.router, prefix="/coffeeshops", tags=["coffeeshops"]
)
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(
    task_results.router, prefix="/task-results", tags=["task-results"]
)
api_router.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
