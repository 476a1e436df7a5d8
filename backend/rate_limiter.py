from fastapi import Request
from slowapi import Limiter

from config import get_settings

UPLOAD_LIMIT = "5/minute; 50/hour; 200/day"
SCORE_LIMIT = "30/minute; 500/hour"


def client_ip(request: Request) -> str:
    """Client address, preferring proxy headers over the socket peer."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip

    if request.client and request.client.host:
        return request.client.host

    return "127.0.0.1"


limiter = Limiter(
    key_func=client_ip,
    default_limits=["200/minute"],
    enabled=get_settings().rate_limit_enabled,
)
