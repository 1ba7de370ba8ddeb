"""
Health router
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from explorer.dependencies.session import get_coordinator
from explorer.services.view_state import ViewStateCoordinator

router = APIRouter()


@router.get("/health")
async def health(coordinator: ViewStateCoordinator = Depends(get_coordinator)):
    return {
        "status": "healthy",
        "catalog": coordinator.status.value,
        "shows": len(coordinator.shows),
        "error": coordinator.error,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
