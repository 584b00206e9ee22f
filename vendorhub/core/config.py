from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./vendorhub.db"
    db_echo: bool = False
    db_pool_size: int = 5
    db_max_overflow: int = 10
    auto_create_tables: bool = True

    auth_secret: str = "vendorhub-dev-secret-change-me"  # override in production
    jwt_lifetime_seconds: int = 3600
    jwt_audience: str = "fastapi-users:auth"

    # Comma separated; profiles created for these emails start as active admins
    admin_emails: str = ""
    cors_origins: str = "http://localhost:3000,http://localhost:5173"
    log_level: str = "INFO"

    twilio_account_sid: str = ""
    twilio_auth_token: str = ""
    twilio_from_number: str = ""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="", case_sensitive=False, extra="ignore")

    @property
    def admin_email_set(self) -> set:
        return {e.strip().lower() for e in self.admin_emails.split(",") if e.strip()}

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
