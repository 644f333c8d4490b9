# reliefhub/routers/users.py
from typing import Optional

from fastapi import Depends

from reliefhub.db import USERS
from reliefhub.deps import AppContext, get_context
from reliefhub.errors import not_found
from reliefhub.routing import Route
from reliefhub.schemas import RoleUpdate

TAG = "users"


async def list_users(role: Optional[str] = None, ctx: AppContext = Depends(get_context)):
    query = {"role": role} if role else {}
    return await ctx.store.find(USERS, query, exclude=("password",))


async def update_role(email: str, body: RoleUpdate, ctx: AppContext = Depends(get_context)):
    matched = await ctx.store.update_one(USERS, {"email": email}, {"role": body.role})
    if not matched:
        raise not_found("User")
    return {"message": "User role updated successfully"}


ROUTES = [
    Route("/users", "GET", list_users),
    Route("/users/{email}/updateRole", "PUT", update_role),
]
