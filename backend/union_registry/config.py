"""Application settings and configuration helpers."""
from functools import lru_cache
import os

from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseModel):
    """Runtime configuration loaded from environment variables."""

    database_url: str = Field(
        default="sqlite+aiosqlite:///./union_registry.db", alias="DATABASE_URL"
    )
    secret_key: str = Field(default="change-me", alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expires_minutes: int = Field(
        default=8 * 60, alias="ACCESS_TOKEN_EXPIRE_MINUTES"
    )
    environment: str = Field(default="development", alias="ENVIRONMENT")

    # Seeded administrator account; the admin console logs in with this password.
    admin_email: str = Field(default="admin@unionregistry.com", alias="ADMIN_EMAIL")
    admin_username: str = Field(default="admin", alias="ADMIN_USERNAME")
    admin_name: str = Field(default="System Administrator", alias="ADMIN_NAME")
    admin_password: str = Field(default="Union@2025", alias="ADMIN_PASSWORD")

    search_result_limit: int = Field(default=50, alias="SEARCH_RESULT_LIMIT")
    search_result_ceiling: int = Field(default=200, alias="SEARCH_RESULT_CEILING")
    admin_audit_log_limit: int = Field(default=1000, alias="ADMIN_AUDIT_LOG_LIMIT")
    dealer_audit_log_limit: int = Field(default=500, alias="DEALER_AUDIT_LOG_LIMIT")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings.model_validate(dict(os.environ))
