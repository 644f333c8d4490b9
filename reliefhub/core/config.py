from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "ReliefHub API"
    api_prefix: str = "/api/v1"

    # Store: Motor/MongoDB when use_mongo, otherwise the in-memory repo
    use_mongo: bool = False
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "floodDisaster"

    port: int = 5000

    jwt_secret: str = "dev-secret-change-me"
    jwt_alg: str = "HS256"
    jwt_expires_minutes: int = 60 * 24

    stripe_secret_key: Optional[str] = None
    payment_currency: str = "usd"
    payments_demo_mode: bool = False

    contribution_retries: int = Field(default=5, ge=1)
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
