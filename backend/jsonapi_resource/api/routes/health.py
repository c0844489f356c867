"""Health — liveness route for the app that hosts the resource error handlers.

Invariants:
    - GET /api/v1/health/ returns 200 while the process is up
"""

from fastapi import APIRouter, status

from jsonapi_resource import __version__

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "version": __version__}
