"""Analytics API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from src.config import get_settings
from src.core.firestore import FetchError
from src.core.rate_limiter import limiter
from src.features.auth.dependencies import verify_admin_token

from .models import AnalyticsSnapshot, ConnectionStatus
from .service import AnalyticsService, get_analytics_service

router = APIRouter(
    prefix="/api/admin/analytics",
    tags=["analytics"],
    dependencies=[Depends(verify_admin_token)],
)


@router.get("/dashboard", response_model=AnalyticsSnapshot)
@limiter.limit(lambda: get_settings().rate_limit)
async def get_dashboard(
    request: Request,
    service: AnalyticsService = Depends(get_analytics_service),
):
    """
    Get complete dashboard statistics.

    Fetches the whole consultation log and recomputes every aggregate.

    Returns:
        Symptom categories, response time, hourly activity, recent
        messages and per-user summary
    """
    try:
        return await service.get_snapshot()
    except FetchError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )


@router.get("/connection", response_model=ConnectionStatus)
async def get_connection_status(
    service: AnalyticsService = Depends(get_analytics_service),
):
    """
    Check that the message datastore is reachable.

    Returns the probe result without raising on failure.
    """
    return await service.check_connection()
