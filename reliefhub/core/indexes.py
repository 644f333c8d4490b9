# reliefhub/core/indexes.py
from pymongo import ASCENDING

# Lookup indexes only; email uniqueness is decided by the handlers.
OWNER_EMAIL_COLLECTIONS = (
    "users", "supply", "applications", "campains", "donations", "volunteers",
)


async def ensure_indexes(db):
    async def ensure_index(col, keys, name: str, **kwargs):
        existing = [ix["name"] async for ix in col.list_indexes()]
        if name in existing:
            return
        await col.create_index(keys, name=name, **kwargs)

    for name in OWNER_EMAIL_COLLECTIONS:
        await ensure_index(db[name], [("email", ASCENDING)], "email_1")
    await ensure_index(db.users, [("role", ASCENDING)], "role_1")
