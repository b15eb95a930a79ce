"""Rate limiting configuration for API endpoints."""

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address


def get_rate_limit_key(request: Request) -> str:
    """Get composite key: admin token + IP for admin endpoints, IP otherwise."""
    ip = get_remote_address(request)

    # Separate buckets per admin token so dashboards behind one proxy don't collide
    if request.url.path.startswith("/api/admin/"):
        token = request.headers.get("x-admin-token")
        if token:
            return f"admin:{token[:8]}:{ip}"

    return ip


limiter = Limiter(key_func=get_rate_limit_key)
