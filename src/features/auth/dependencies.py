"""FastAPI authentication dependencies."""

from fastapi import Header, HTTPException, status

from src.config import get_settings


async def verify_admin_token(
    x_admin_token: str = Header(..., description="Admin API token"),
) -> bool:
    """
    Verify admin access token.

    Token comes from the ADMIN_API_TOKEN environment variable.
    """
    settings = get_settings()

    if not settings.admin_api_token:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Admin authentication not configured",
        )

    if x_admin_token != settings.admin_api_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin token",
        )

    return True
