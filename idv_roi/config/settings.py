from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    tables_file: str = ""
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "IDV_ROI_"


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    return Settings()
