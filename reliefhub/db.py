# reliefhub/db.py
import logging
from typing import Any, Dict, Optional

from bson import ObjectId

from reliefhub.core.config import Settings
from reliefhub.errors import ApiError

logger = logging.getLogger(__name__)

# Collection names are shared with the existing clients' database.
USERS = "users"
SUPPLY = "supply"
APPLICATIONS = "applications"
CAMPAIGNS = "campains"
DONATIONS = "donations"
TESTIMONIALS = "testimonials"
REVIEWS = "reviews"
NEWS = "news"
VOLUNTEERS = "volunteers"


def parse_oid(value: str) -> ObjectId:
    """Parse a path id, raising the 400 used by every by-id route."""
    if not ObjectId.is_valid(value):
        raise ApiError(400, {"error": "Invalid ID format"})
    return ObjectId(value)


def serialize(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if doc is None:
        return None
    doc = dict(doc)
    if isinstance(doc.get("_id"), ObjectId):
        doc["_id"] = str(doc["_id"])
    return doc


def create_store(settings: Settings):
    if settings.use_mongo:
        from motor.motor_asyncio import AsyncIOMotorClient
        from reliefhub.repos.mongo import MongoStore

        logger.info("Using MongoDB store %s/%s", settings.mongodb_uri, settings.mongodb_db)
        return MongoStore(AsyncIOMotorClient(settings.mongodb_uri), settings.mongodb_db)

    from reliefhub.repos.inmemory import InMemoryStore

    logger.info("Using in-memory store")
    return InMemoryStore()
