# reliefhub/routers/donations.py
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends

from reliefhub.db import DONATIONS
from reliefhub.deps import AppContext, get_context
from reliefhub.routing import Route
from reliefhub.schemas import DonationIn
from reliefhub.services.leaderboard import donation_leaderboard

TAG = "donations"


async def donate(body: DonationIn, ctx: AppContext = Depends(get_context)):
    doc = body.model_dump()
    doc.setdefault("created_at", datetime.now(timezone.utc))
    inserted_id = await ctx.store.insert_one(DONATIONS, doc)
    return {"success": True, "message": "donation recorded successfully", "insertedId": inserted_id}


async def list_donations(email: Optional[str] = None, ctx: AppContext = Depends(get_context)):
    query = {"email": email} if email else {}
    return await ctx.store.find(DONATIONS, query)


async def leaderboard(ctx: AppContext = Depends(get_context)):
    return await donation_leaderboard(ctx.store)


ROUTES = [
    Route("/donate", "POST", donate, status_code=201),
    Route("/donations", "GET", list_donations),
    Route("/leaderboard", "GET", leaderboard),
]
