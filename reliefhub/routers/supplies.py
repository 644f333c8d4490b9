# reliefhub/routers/supplies.py
from typing import Optional

from fastapi import Depends

from reliefhub.db import SUPPLY, parse_oid
from reliefhub.deps import AppContext, get_context
from reliefhub.errors import not_found
from reliefhub.routing import Route
from reliefhub.schemas import SupplyIn, SupplyStatusUpdate
from reliefhub.services.leaderboard import supply_leaderboard as rank_suppliers

TAG = "supplies"


async def add_supply(body: SupplyIn, ctx: AppContext = Depends(get_context)):
    inserted_id = await ctx.store.insert_one(SUPPLY, body.model_dump())
    return {"success": True, "message": "supply posted successfully", "insertedId": inserted_id}


async def list_supplies(email: Optional[str] = None, ctx: AppContext = Depends(get_context)):
    query = {"email": email} if email else {}
    return await ctx.store.find(SUPPLY, query)


async def get_supply(id: str, ctx: AppContext = Depends(get_context)):
    doc = await ctx.store.find_one(SUPPLY, {"_id": parse_oid(id)})
    if not doc:
        raise not_found("Supply")
    return doc


async def mark_applied(id: str, body: SupplyStatusUpdate, ctx: AppContext = Depends(get_context)):
    matched = await ctx.store.update_one(SUPPLY, {"_id": parse_oid(id)}, {"isApplied": body.isApplied})
    if not matched:
        raise not_found("Supply")
    return {"message": "Supply status updated successfully"}


async def delete_supply(id: str, ctx: AppContext = Depends(get_context)):
    # applications that reference the supply are left in place
    deleted = await ctx.store.delete_one(SUPPLY, {"_id": parse_oid(id)})
    if not deleted:
        raise not_found("Supply")
    return {"acknowledged": True, "deletedCount": deleted}


async def supply_leaderboard(ctx: AppContext = Depends(get_context)):
    return await rank_suppliers(ctx.store)


ROUTES = [
    Route("/addSupply", "POST", add_supply, status_code=201),
    Route("/supplies", "GET", list_supplies),
    Route("/leaderboard/supplies", "GET", supply_leaderboard),
    Route("/supplies/{id}", "GET", get_supply),
    Route("/supplies/{id}", "PUT", mark_applied),
    Route("/supplies/{id}", "DELETE", delete_supply),
]
