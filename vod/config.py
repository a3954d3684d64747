from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///./vod.db"

    # Video store backend: "sql" (database_url) or "memory" (process-local)
    store: str = "sql"

    # Insert the two sample videos when the store is empty
    seed_on_startup: bool = True

    # Run Base.metadata.create_all at startup (alembic is still the source of truth)
    create_tables: bool = True

    # Frontend URL for CORS
    frontend_url: str = "http://localhost:3000"

    # Server (vod-server entry point)
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "info"

    class Config:
        env_prefix = "VOD_"
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
