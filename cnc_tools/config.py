from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "CNC Tools"
    DATABASE_URL: str = "sqlite:///./cnc_tools.db"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    DATABASE_ECHO: bool = False

    class Config:
        env_file = ".env"


settings = Settings()
