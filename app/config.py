from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # Server
    APP_NAME: str = "Math Function Service"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Health report
    TIMEZONE: str = "Asia/Ho_Chi_Minh"
    REGION: str = "VN"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

@lru_cache()
def get_settings() -> Settings:
    return Settings()
