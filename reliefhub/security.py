# reliefhub/security.py
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt
from passlib.context import CryptContext

pwd_ctx = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# hashes written by the previous server (bcrypt, cost 10)
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def hash_password(p: str) -> str:
    return pwd_ctx.hash(p)


def _verify_bcrypt(p: str, h: str) -> bool:
    # bcrypt only reads the first 72 bytes
    try:
        return bcrypt.checkpw(p.encode("utf-8")[:72], h.encode("utf-8"))
    except ValueError:
        return False


def verify_password(p: str, h: str) -> bool:
    if isinstance(h, str) and h.startswith(BCRYPT_PREFIXES):
        return _verify_bcrypt(p, h)
    try:
        return pwd_ctx.verify(p, h)
    except (ValueError, TypeError):
        # empty or unrecognised hash formats
        return False


def create_token(email: str, secret: str, alg: str = "HS256", minutes: int = 60) -> str:
    now = datetime.now(timezone.utc)
    payload = {"email": email, "iat": now, "exp": now + timedelta(minutes=minutes)}
    return jwt.encode(payload, secret, algorithm=alg)


def decode_token(token: str, secret: str, alg: str = "HS256") -> Optional[str]:
    """Return the email claim, or None for a bad or expired token."""
    try:
        data = jwt.decode(token, secret, algorithms=[alg])
    except JWTError:
        return None
    return data.get("email")
