# reliefhub/repos/mongo.py
from typing import Any, Dict, Iterable, List, Optional

from motor.motor_asyncio import AsyncIOMotorClient

from reliefhub.core.indexes import ensure_indexes
from reliefhub.db import serialize


def _projection(exclude: Iterable[str]) -> Optional[Dict[str, int]]:
    return {field: 0 for field in exclude} or None


class MongoStore:
    def __init__(self, client: AsyncIOMotorClient, db_name: str):
        self._client = client
        self._db = client[db_name]

    def col(self, name: str):
        return self._db[name]

    async def insert_one(self, collection: str, doc: Dict[str, Any]) -> str:
        res = await self.col(collection).insert_one(dict(doc))
        return str(res.inserted_id)

    async def find(self, collection, query=None, exclude=()) -> List[Dict[str, Any]]:
        cur = self.col(collection).find(query or {}, _projection(exclude))
        return [serialize(d) async for d in cur]

    async def find_one(self, collection, query, exclude=()) -> Optional[Dict[str, Any]]:
        doc = await self.col(collection).find_one(query, _projection(exclude))
        return serialize(doc)

    async def update_one(self, collection, query, values) -> int:
        res = await self.col(collection).update_one(query, {"$set": values})
        return res.matched_count

    async def delete_one(self, collection, query) -> int:
        res = await self.col(collection).delete_one(query)
        return res.deleted_count

    async def group_totals(self, collection, key, amount_field=None) -> List[Dict[str, Any]]:
        total = {"$sum": f"${amount_field}"} if amount_field else {"$sum": 1}
        pipeline = [
            {"$group": {
                "_id": f"${key}",
                "name": {"$first": "$name"},
                "total": total,
                "count": {"$sum": 1},
            }},
            {"$sort": {"total": -1}},
        ]
        return [row async for row in self.col(collection).aggregate(pipeline)]

    async def ensure_indexes(self) -> None:
        await ensure_indexes(self._db)

    def close(self) -> None:
        self._client.close()
