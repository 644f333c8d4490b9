"""
Interface shared by the MongoDB and in-memory document stores.

Queries are plain Mongo-style equality filters (``{"email": "a@b.c"}``,
``{"_id": ObjectId(...)}``). A ``None`` value matches a missing or null field.
Documents come back with ``_id`` rendered as its hex string.
"""

from typing import Any, Dict, Iterable, List, Optional, Protocol


class DocumentStore(Protocol):
    async def insert_one(self, collection: str, doc: Dict[str, Any]) -> str:
        ...

    async def find(
        self,
        collection: str,
        query: Optional[Dict[str, Any]] = None,
        exclude: Iterable[str] = (),
    ) -> List[Dict[str, Any]]:
        ...

    async def find_one(
        self,
        collection: str,
        query: Dict[str, Any],
        exclude: Iterable[str] = (),
    ) -> Optional[Dict[str, Any]]:
        ...

    async def update_one(
        self, collection: str, query: Dict[str, Any], values: Dict[str, Any]
    ) -> int:
        """Set ``values`` on the first match; returns the matched count."""
        ...

    async def delete_one(self, collection: str, query: Dict[str, Any]) -> int:
        ...

    async def group_totals(
        self, collection: str, key: str, amount_field: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Group documents by ``key``. Each row is
        ``{"_id": <key value>, "name": <first name seen>, "total": ..., "count": ...}``
        where ``total`` sums ``amount_field`` (numbers only) or, without one,
        counts documents. Rows are ordered by descending total.
        """
        ...

    async def ensure_indexes(self) -> None:
        ...

    def close(self) -> None:
        ...
