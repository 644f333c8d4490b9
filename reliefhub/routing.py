# reliefhub/routing.py
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from fastapi import APIRouter


@dataclass(frozen=True)
class Route:
    path: str
    method: str
    handler: Callable
    status_code: int = 200
    name: Optional[str] = None


def build_router(routes: Iterable[Route], prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    for r in routes:
        router.add_api_route(
            r.path,
            r.handler,
            methods=[r.method],
            status_code=r.status_code,
            name=r.name or r.handler.__name__,
        )
    return router
