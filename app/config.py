# config.py

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Listener
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000)

    log_level: str = Field(default="INFO")

    # Reproduce the original service, which answered a missing customer id with status 200
    legacy_customer_status: bool = Field(default=False)

    model_config = SettingsConfigDict(env_prefix="ORDER_API_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
