from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    database_url: str = "sqlite:///./marketplace.db"
    secret_key: str = "dev-secret-key-change-in-production"
    token_expire_days: int = 30

    # CORS origin of the web frontend
    frontend_url: str = "http://localhost:3000"

    log_level: str = "INFO"

    # Pagination
    default_page_size: int = 10
    max_page_size: int = 100

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
