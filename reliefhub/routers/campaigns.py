# reliefhub/routers/campaigns.py
from typing import Optional

from fastapi import Depends

from reliefhub.db import CAMPAIGNS, parse_oid
from reliefhub.deps import AppContext, get_context
from reliefhub.errors import ApiError, not_found
from reliefhub.routing import Route
from reliefhub.schemas import CampaignIn, Contribution
from reliefhub.services.amounts import positive_number
from reliefhub.services.campaigns import contribute as add_to_campaign

TAG = "campaigns"


async def add_campaign(body: CampaignIn, ctx: AppContext = Depends(get_context)):
    inserted_id = await ctx.store.insert_one(CAMPAIGNS, body.model_dump())
    return {"success": True, "message": "campaign posted successfully", "insertedId": inserted_id}


async def list_campaigns(email: Optional[str] = None, ctx: AppContext = Depends(get_context)):
    query = {"email": email} if email else {}
    return await ctx.store.find(CAMPAIGNS, query)


async def get_campaign(id: str, ctx: AppContext = Depends(get_context)):
    doc = await ctx.store.find_one(CAMPAIGNS, {"_id": parse_oid(id)})
    if not doc:
        raise not_found("Campaign")
    return doc


async def contribute(id: str, body: Contribution, ctx: AppContext = Depends(get_context)):
    oid = parse_oid(id)
    amount = positive_number(body.newAmount)
    if amount is None:
        raise ApiError(400, {"error": "Invalid amount"})

    total = await add_to_campaign(ctx.store, oid, amount, ctx.settings.contribution_retries)
    return {"message": "Amount updated successfully", "collectedAmount": total}


async def delete_campaign(id: str, ctx: AppContext = Depends(get_context)):
    deleted = await ctx.store.delete_one(CAMPAIGNS, {"_id": parse_oid(id)})
    if not deleted:
        raise not_found("Campaign")
    return {"acknowledged": True, "deletedCount": deleted}


ROUTES = [
    Route("/addCampain", "POST", add_campaign, status_code=201),
    Route("/campains", "GET", list_campaigns),
    Route("/campains/{id}", "GET", get_campaign),
    Route("/campains/{id}", "PUT", contribute),
    Route("/campains/{id}", "DELETE", delete_campaign),
]
