"""
Health check API routes.

Kubernetes-compatible liveness and readiness probes.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response, status

from parrain.config.settings import get_settings
from parrain.di.dependencies import get_user_store
from parrain.domain.repositories.i_user_store import IUserStore

router = APIRouter(prefix="/health", tags=["Health"])


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    Liveness probe endpoint.

    Returns basic service info without checking dependencies.
    """
    return {
        "status": "healthy",
        "component": "parrain",
        "version": get_settings().APP_VERSION,
        "timestamp": _timestamp(),
    }


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_probe(
    response: Response,
    user_store: IUserStore = Depends(get_user_store),
):
    """
    Readiness probe endpoint.

    Checks that the user store document can be loaded.
    Returns 503 when it cannot.
    """
    store_healthy = await user_store.health_check()

    if not store_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "healthy" if store_healthy else "unhealthy",
        "component": "parrain",
        "version": get_settings().APP_VERSION,
        "timestamp": _timestamp(),
        "checks": {
            "user_store": {
                "status": "healthy" if store_healthy else "unhealthy",
            },
        },
    }


@router.get("", status_code=status.HTTP_200_OK)
async def health_check_endpoint(
    response: Response,
    user_store: IUserStore = Depends(get_user_store),
):
    """General health check endpoint (alias for readiness)."""
    return await readiness_probe(response, user_store)
