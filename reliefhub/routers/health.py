# reliefhub/routers/health.py
from datetime import datetime, timezone

from reliefhub.routing import Route

TAG = "health"


async def root():
    return {
        "message": "Server is running smoothly",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


ROUTES = [Route("/", "GET", root)]
