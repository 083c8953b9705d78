from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    # Supabase (anon key only; RLS does the authorization)
    supabase_url: str = "http://127.0.0.1:54321"
    supabase_anon_key: str = ""

    # OpenAPI document
    app_name: str = "Supabase Demo API"
    app_version: str = "1.0.0"
    app_description: str = "FastAPI + Supabase Demo API"
    public_url: str = "http://localhost:8787"

    # Server
    host: str = "0.0.0.0"
    port: int = 8787

    # App
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "*"  # narrow this outside of local demos
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"
    rate_limit_enabled: bool = True

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
