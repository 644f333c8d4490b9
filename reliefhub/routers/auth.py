# reliefhub/routers/auth.py
import logging
from typing import Optional

from fastapi import Depends, Header

from reliefhub.db import USERS
from reliefhub.deps import AppContext, get_context
from reliefhub.errors import ApiError
from reliefhub.routing import Route
from reliefhub.schemas import LoginIn, RegisterIn
from reliefhub.security import create_token, decode_token, hash_password, verify_password

logger = logging.getLogger(__name__)

TAG = "auth"
INVALID_LOGIN = {"message": "Invalid email or password"}


async def register(body: RegisterIn, ctx: AppContext = Depends(get_context)):
    existing = await ctx.store.find_one(USERS, {"email": body.email})
    if existing:
        logger.info("Registration refused, %s already exists", body.email)
        raise ApiError(400, {"success": False, "message": "User already exists"})

    await ctx.store.insert_one(USERS, {
        "name": body.name,
        "email": body.email,
        "role": body.role,
        "password": hash_password(body.password),
    })
    return {"success": True, "message": "User registered successfully"}


async def login(body: LoginIn, ctx: AppContext = Depends(get_context)):
    user = await ctx.store.find_one(USERS, {"email": body.email})
    # same answer for unknown email and wrong password
    if not user or not verify_password(body.password, user.get("password") or ""):
        logger.info("Failed login for %s", body.email)
        raise ApiError(401, INVALID_LOGIN)

    s = ctx.settings
    token = create_token(user["email"], s.jwt_secret, s.jwt_alg, s.jwt_expires_minutes)
    return {
        "success": True,
        "message": "Login successful",
        "email": user["email"],
        "token": token,
        "role": user.get("role"),
        "name": user.get("name"),
    }


async def get_current_user(
    authorization: Optional[str] = Header(default=None),
    ctx: AppContext = Depends(get_context),
):
    if not authorization or not authorization.lower().startswith("bearer "):
        raise ApiError(401, {"message": "Missing token"})
    email = decode_token(authorization.split(" ", 1)[1], ctx.settings.jwt_secret, ctx.settings.jwt_alg)
    if not email:
        raise ApiError(401, {"message": "Invalid token"})
    user = await ctx.store.find_one(USERS, {"email": email}, exclude=("password",))
    if not user:
        raise ApiError(401, {"message": "Invalid token"})
    return user


async def me(user: dict = Depends(get_current_user)):
    return user


ROUTES = [
    Route("/register", "POST", register, status_code=201),
    Route("/login", "POST", login),
    Route("/me", "GET", me),
]
