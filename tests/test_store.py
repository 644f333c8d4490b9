import pytest
from bson import ObjectId

from reliefhub.db import parse_oid, serialize
from reliefhub.errors import ApiError
from reliefhub.repos.inmemory import InMemoryStore

pytestmark = pytest.mark.anyio


async def test_none_matches_missing_or_null():
    store = InMemoryStore()
    await store.insert_one("c", {"a": 1})
    await store.insert_one("c", {"a": 2, "b": None})
    await store.insert_one("c", {"a": 3, "b": 0})

    assert sorted(d["a"] for d in await store.find("c", {"b": None})) == [1, 2]


async def test_booleans_do_not_match_numbers():
    store = InMemoryStore()
    await store.insert_one("c", {"flag": True})
    assert await store.find("c", {"flag": 1}) == []
    assert len(await store.find("c", {"flag": True})) == 1


async def test_stored_documents_are_isolated_from_callers():
    store = InMemoryStore()
    doc = {"tags": ["a"]}
    oid = await store.insert_one("c", doc)
    doc["tags"].append("b")

    found = await store.find_one("c", {"_id": ObjectId(oid)})
    assert found["tags"] == ["a"]
    found["tags"].append("c")
    assert (await store.find_one("c", {"_id": ObjectId(oid)}))["tags"] == ["a"]


async def test_exclude_drops_fields():
    store = InMemoryStore()
    await store.insert_one("users", {"email": "a@b.c", "password": "hash"})
    (user,) = await store.find("users", exclude=("password",))
    assert "password" not in user
    assert isinstance(user["_id"], str)


async def test_group_totals_skips_non_numeric_amounts():
    store = InMemoryStore()
    for email, amount in (("a", 10), ("a", "oops"), ("b", 4), ("a", True)):
        await store.insert_one("donations", {"email": email, "amount": amount})

    rows = await store.group_totals("donations", key="email", amount_field="amount")
    assert [(r["_id"], r["total"], r["count"]) for r in rows] == [("a", 10, 3), ("b", 4, 1)]


async def test_update_and_delete_report_counts():
    store = InMemoryStore()
    oid = ObjectId(await store.insert_one("c", {"x": 1}))
    assert await store.update_one("c", {"_id": oid}, {"x": 2}) == 1
    assert await store.update_one("c", {"_id": ObjectId()}, {"x": 2}) == 0
    assert await store.delete_one("c", {"_id": oid}) == 1
    assert await store.delete_one("c", {"_id": oid}) == 0


def test_parse_oid():
    oid = ObjectId()
    assert parse_oid(str(oid)) == oid
    with pytest.raises(ApiError) as exc:
        parse_oid("abc")
    assert exc.value.status_code == 400


def test_serialize_renders_object_id():
    oid = ObjectId()
    assert serialize({"_id": oid, "n": 1}) == {"_id": str(oid), "n": 1}
    assert serialize(None) is None
