import pytest
from httpx import AsyncClient

from reliefhub.db import APPLICATIONS, SUPPLY, parse_oid
from tests.conftest import API

pytestmark = pytest.mark.anyio

ABSENT_ID = "0123456789abcdef01234567"


async def _post_supply(ac: AsyncClient, email="giver@relief.org", **fields):
    r = await ac.post(f"{API}/addSupply", json={"email": email, "title": "Blankets", **fields})
    assert r.status_code == 201, r.text
    return r.json()["insertedId"]


async def test_add_and_list_supplies(test_client: AsyncClient):
    await _post_supply(test_client, quantity=40, category="shelter")
    await _post_supply(test_client, email="other@relief.org")

    everything = (await test_client.get(f"{API}/supplies")).json()
    assert len(everything) == 2

    mine = (await test_client.get(f"{API}/supplies", params={"email": "giver@relief.org"})).json()
    assert len(mine) == 1
    assert mine[0]["quantity"] == 40
    assert mine[0]["category"] == "shelter"
    assert mine[0]["isApplied"] is False


async def test_extra_fields_are_kept(test_client: AsyncClient, store):
    supply_id = await _post_supply(test_client, location="Sylhet", urgent=True)
    doc = await store.find_one(SUPPLY, {"_id": parse_oid(supply_id)})
    assert doc["location"] == "Sylhet"
    assert doc["urgent"] is True


async def test_get_supply_by_id(test_client: AsyncClient):
    supply_id = await _post_supply(test_client)
    r = await test_client.get(f"{API}/supplies/{supply_id}")
    assert r.status_code == 200
    assert r.json()["_id"] == supply_id

    assert (await test_client.get(f"{API}/supplies/abc")).status_code == 400
    assert (await test_client.get(f"{API}/supplies/{ABSENT_ID}")).status_code == 404


async def test_mark_applied(test_client: AsyncClient, store):
    supply_id = await _post_supply(test_client)

    bad = await test_client.put(f"{API}/supplies/abc", json={"isApplied": True})
    assert bad.status_code == 400
    assert bad.json() == {"error": "Invalid ID format"}

    absent = await test_client.put(f"{API}/supplies/{ABSENT_ID}", json={"isApplied": True})
    assert absent.status_code == 404

    ok = await test_client.put(f"{API}/supplies/{supply_id}", json={"isApplied": True})
    assert ok.status_code == 200
    assert (await store.find_one(SUPPLY, {"_id": parse_oid(supply_id)}))["isApplied"] is True

    # setting the value it already has still succeeds
    again = await test_client.put(f"{API}/supplies/{supply_id}", json={"isApplied": True})
    assert again.status_code == 200


async def test_delete_supply_leaves_applications(test_client: AsyncClient, store):
    supply_id = await _post_supply(test_client)
    await test_client.post(f"{API}/addApply", json={"email": "needy@relief.org", "supplyId": supply_id})

    r = await test_client.delete(f"{API}/supplies/{supply_id}")
    assert r.status_code == 200
    assert r.json()["deletedCount"] == 1
    assert (await test_client.delete(f"{API}/supplies/{supply_id}")).status_code == 404
    assert (await test_client.delete(f"{API}/supplies/nope")).status_code == 400

    assert len(await store.find(APPLICATIONS, {"supplyId": supply_id})) == 1


async def test_supply_leaderboard_counts_postings(test_client: AsyncClient):
    for _ in range(3):
        await _post_supply(test_client, email="busy@relief.org", name="Busy")
    await _post_supply(test_client, email="casual@relief.org", name="Casual")

    board = (await test_client.get(f"{API}/leaderboard/supplies")).json()
    assert [row["email"] for row in board] == ["busy@relief.org", "casual@relief.org"]
    assert board[0]["totalSupplies"] == 3
    assert board[0]["name"] == "Busy"


async def test_add_supply_requires_email(test_client: AsyncClient):
    r = await test_client.post(f"{API}/addSupply", json={"title": "Rice"})
    assert r.status_code == 400
