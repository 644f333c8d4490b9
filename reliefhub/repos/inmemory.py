# reliefhub/repos/inmemory.py
import copy
from collections import defaultdict
from typing import Any, Dict, List, Optional

from bson import ObjectId

from reliefhub.db import serialize


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _field_matches(doc: dict, field: str, expected: Any) -> bool:
    if expected is None:
        return doc.get(field) is None
    if field not in doc:
        return False
    actual = doc[field]
    # Mongo never equates booleans with numbers
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    return actual == expected


def _matches(doc: dict, query: Optional[dict]) -> bool:
    return all(_field_matches(doc, k, v) for k, v in (query or {}).items())


class InMemoryStore:
    """Dict-backed stand-in for MongoStore, used in development and tests."""

    def __init__(self):
        self.collections: Dict[str, Dict[ObjectId, dict]] = defaultdict(dict)

    def _docs(self, collection: str) -> List[dict]:
        return list(self.collections[collection].values())

    @staticmethod
    def _out(doc: dict, exclude) -> dict:
        doc = copy.deepcopy(doc)
        for field in exclude:
            doc.pop(field, None)
        return serialize(doc)

    async def insert_one(self, collection: str, doc: Dict[str, Any]) -> str:
        doc = copy.deepcopy(doc)
        oid = doc.setdefault("_id", ObjectId())
        self.collections[collection][oid] = doc
        return str(oid)

    async def find(self, collection, query=None, exclude=()) -> List[Dict[str, Any]]:
        return [self._out(d, exclude) for d in self._docs(collection) if _matches(d, query)]

    async def find_one(self, collection, query, exclude=()) -> Optional[Dict[str, Any]]:
        for d in self._docs(collection):
            if _matches(d, query):
                return self._out(d, exclude)
        return None

    async def update_one(self, collection, query, values) -> int:
        for d in self._docs(collection):
            if _matches(d, query):
                d.update(copy.deepcopy(values))
                return 1
        return 0

    async def delete_one(self, collection, query) -> int:
        docs = self.collections[collection]
        for oid, d in list(docs.items()):
            if _matches(d, query):
                del docs[oid]
                return 1
        return 0

    async def group_totals(self, collection, key, amount_field=None) -> List[Dict[str, Any]]:
        groups: Dict[Any, dict] = {}
        for d in self._docs(collection):
            row = groups.setdefault(
                d.get(key), {"_id": d.get(key), "name": d.get("name"), "total": 0, "count": 0}
            )
            row["count"] += 1
            if amount_field is None:
                row["total"] += 1
            elif _is_number(d.get(amount_field)):
                row["total"] += d[amount_field]
        return sorted(groups.values(), key=lambda r: r["total"], reverse=True)

    async def ensure_indexes(self) -> None:
        return None

    def close(self) -> None:
        return None
