from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "IGDB Search Gateway"
    IGDB_CLIENT_ID: str = ""
    IGDB_CLIENT_SECRET: SecretStr = SecretStr("")
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        frozen = True       # read-only after startup
        extra = "ignore"

@lru_cache
def get_settings() -> Settings:
    return Settings()
