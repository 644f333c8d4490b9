from fastapi import APIRouter

from reliefhub.routers import (
    applications, auth, campaigns, content, donations, payments, supplies, users,
)
from reliefhub.routing import build_router

RESOURCES = (auth, users, supplies, applications, campaigns, donations, content, payments)


def build_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    for module in RESOURCES:
        router.include_router(build_router(module.ROUTES), tags=[module.TAG])
    return router
