# reliefhub/services/leaderboard.py
from reliefhub.db import DONATIONS, SUPPLY


async def donation_leaderboard(store):
    """Donors ranked by summed donation amount (ties unordered)."""
    rows = await store.group_totals(DONATIONS, key="email", amount_field="amount")
    return [
        {"_id": r["_id"], "email": r["_id"], "name": r.get("name"),
         "totalAmount": r["total"], "count": r["count"]}
        for r in rows
    ]


async def supply_leaderboard(store):
    """Suppliers ranked by number of supply postings."""
    rows = await store.group_totals(SUPPLY, key="email")
    return [
        {"_id": r["_id"], "email": r["_id"], "name": r.get("name"),
         "totalSupplies": r["total"], "count": r["count"]}
        for r in rows
    ]
