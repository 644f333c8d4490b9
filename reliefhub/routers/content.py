# reliefhub/routers/content.py
"""
Testimonials, reviews, news and volunteers.

The first three only differ by collection, body type and paths, so their
create/list handlers are generated from ``CONTENT``.
"""
from dataclasses import dataclass
from typing import List, Optional, Type

from fastapi import Depends
from pydantic import BaseModel

from reliefhub.db import NEWS, REVIEWS, TESTIMONIALS, VOLUNTEERS
from reliefhub.deps import AppContext, get_context
from reliefhub.errors import ApiError
from reliefhub.routing import Route
from reliefhub.schemas import NewsIn, ReviewIn, TestimonialIn, VolunteerIn

TAG = "content"


@dataclass(frozen=True)
class ContentCollection:
    collection: str
    record: Type[BaseModel]
    list_path: str
    create_path: str
    created_message: str


CONTENT = (
    ContentCollection(TESTIMONIALS, TestimonialIn, "/testimonials", "/testimonials",
                      "testimonial added successfully"),
    ContentCollection(REVIEWS, ReviewIn, "/reviews", "/reviews", "review added successfully"),
    ContentCollection(NEWS, NewsIn, "/allNews", "/addNews", "news posted successfully"),
)


def _create_handler(entry: ContentCollection):
    record = entry.record

    async def create(body: record, ctx: AppContext = Depends(get_context)):
        inserted_id = await ctx.store.insert_one(entry.collection, body.model_dump())
        return {"success": True, "message": entry.created_message, "insertedId": inserted_id}

    return create


def _list_handler(entry: ContentCollection):
    async def list_all(ctx: AppContext = Depends(get_context)):
        return await ctx.store.find(entry.collection)

    return list_all


def content_routes(entries) -> List[Route]:
    routes = []
    for entry in entries:
        routes.append(Route(entry.create_path, "POST", _create_handler(entry), status_code=201,
                            name=f"add_{entry.collection}"))
        routes.append(Route(entry.list_path, "GET", _list_handler(entry),
                            name=f"list_{entry.collection}"))
    return routes


async def add_volunteer(body: VolunteerIn, ctx: AppContext = Depends(get_context)):
    if await ctx.store.find_one(VOLUNTEERS, {"email": body.email}):
        raise ApiError(400, {"success": False, "message": "Volunteer already registered"})
    inserted_id = await ctx.store.insert_one(VOLUNTEERS, body.model_dump())
    return {"success": True, "message": "volunteer registered successfully", "insertedId": inserted_id}


async def list_volunteers(email: Optional[str] = None, ctx: AppContext = Depends(get_context)):
    query = {"email": email} if email else {}
    return await ctx.store.find(VOLUNTEERS, query)


ROUTES = content_routes(CONTENT) + [
    Route("/volunteer", "POST", add_volunteer, status_code=201),
    Route("/volunteers", "GET", list_volunteers),
]
