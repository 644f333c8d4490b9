import pytest
from httpx import AsyncClient

from reliefhub.db import USERS
from tests.conftest import API

pytestmark = pytest.mark.anyio


async def _seed(ac: AsyncClient):
    for name, role in (("Ana", "donor"), ("Ben", "volunteer"), ("Cy", "donor")):
        await ac.post(f"{API}/register", json={
            "name": name, "email": f"{name.lower()}@relief.org", "password": "pw", "role": role,
        })


async def test_list_users_filters_by_role(test_client: AsyncClient):
    await _seed(test_client)

    everyone = (await test_client.get(f"{API}/users")).json()
    assert len(everyone) == 3
    assert all("password" not in u for u in everyone)

    donors = (await test_client.get(f"{API}/users", params={"role": "donor"})).json()
    assert {u["name"] for u in donors} == {"Ana", "Cy"}


async def test_update_role(test_client: AsyncClient, store):
    await _seed(test_client)
    r = await test_client.put(f"{API}/users/ben@relief.org/updateRole", json={"role": "admin"})
    assert r.status_code == 200
    assert (await store.find_one(USERS, {"email": "ben@relief.org"}))["role"] == "admin"

    missing = await test_client.put(f"{API}/users/nobody@relief.org/updateRole", json={"role": "admin"})
    assert missing.status_code == 404
