from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


DEFAULT_AUTH_SECRET = "dev-secret-change-me"


class Settings(BaseSettings):
    env: str = "dev"
    database_url: str = "sqlite:///./data/yatra.db"
    log_level: str = "INFO"

    # Bearer tokens are minted by the identity provider; we only verify them
    auth_secret_key: str = DEFAULT_AUTH_SECRET
    auth_algorithm: str = "HS256"
    auth_audience: Optional[str] = None

    public_object_search_paths: list[str] = ["./public"]

    tax_rate: float = 0.10
    payment_simulation_delay_seconds: float = 1.0
    checkout_draft_ttl_minutes: int = 30

    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    def model_post_init(self, __context):
        if self.env == "prod" and self.database_url.startswith("sqlite"):
            raise ValueError(
                "Production requires explicit DATABASE_URL (not SQLite)"
            )
        if self.env == "prod" and self.auth_secret_key == DEFAULT_AUTH_SECRET:
            raise ValueError(
                "Production requires AUTH_SECRET_KEY to be set"
            )

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
