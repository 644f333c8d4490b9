# reliefhub/routers/applications.py
import logging
from typing import Optional

from fastapi import Depends

from reliefhub.db import APPLICATIONS, SUPPLY, parse_oid
from reliefhub.deps import AppContext, get_context
from reliefhub.errors import not_found
from reliefhub.routing import Route
from reliefhub.schemas import ApplicationIn, ApprovalUpdate

logger = logging.getLogger(__name__)

TAG = "applications"
APPROVED = {"message": "Supply status updated successfully"}


async def add_apply(body: ApplicationIn, ctx: AppContext = Depends(get_context)):
    inserted_id = await ctx.store.insert_one(APPLICATIONS, body.model_dump())
    return {"success": True, "message": "applied successfully", "insertedId": inserted_id}


async def list_applies(email: Optional[str] = None, ctx: AppContext = Depends(get_context)):
    query = {"email": email} if email else {}
    return await ctx.store.find(APPLICATIONS, query)


async def deny(id: str, ctx: AppContext = Depends(get_context)):
    deleted = await ctx.store.delete_one(APPLICATIONS, {"_id": parse_oid(id)})
    if not deleted:
        raise not_found("Application")
    return {"acknowledged": True, "deletedCount": deleted}


async def approve(id: str, body: ApprovalUpdate, ctx: AppContext = Depends(get_context)):
    matched = await ctx.store.update_one(
        APPLICATIONS, {"_id": parse_oid(id)}, {"isApproved": body.isApproved}
    )
    if not matched:
        raise not_found("Application")
    return APPROVED


async def approve_with_supply(
    apply_id: str, supply_id: str, body: ApprovalUpdate, ctx: AppContext = Depends(get_context)
):
    """
    Set isApproved on the application and on its supply.

    The two writes are independent: the request succeeds when either one
    matched, and a half-applied approval is only logged.
    """
    apply_oid, supply_oid = parse_oid(apply_id), parse_oid(supply_id)
    values = {"isApproved": body.isApproved}

    apply_matched = await ctx.store.update_one(APPLICATIONS, {"_id": apply_oid}, values)
    supply_matched = await ctx.store.update_one(SUPPLY, {"_id": supply_oid}, values)

    if not apply_matched and not supply_matched:
        raise not_found("Supply")
    if not (apply_matched and supply_matched):
        logger.warning(
            "Partial approval: application %s matched=%s, supply %s matched=%s",
            apply_id, apply_matched, supply_id, supply_matched,
        )
    return APPROVED


ROUTES = [
    Route("/addApply", "POST", add_apply, status_code=201),
    Route("/applies", "GET", list_applies),
    Route("/deny/{id}", "DELETE", deny),
    Route("/approve/{id}", "PUT", approve),
    Route("/approve/{apply_id}/{supply_id}", "PUT", approve_with_supply),
]
