"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, disciplines, program, ratings, results, stats, users

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    users.router, prefix="/users", tags=["Users"]
)
api_router.include_router(
    results.router, prefix="/results", tags=["Results"]
)
api_router.include_router(
    disciplines.router, prefix="/disciplines", tags=["Disciplines"]
)
api_router.include_router(
    ratings.router, prefix="/ratings", tags=["Ratings"]
)
api_router.include_router(
    stats.router, prefix="/stats", tags=["Stats"]
)
api_router.include_router(
    program.router, prefix="/program", tags=["Training program"]
)
