from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    DATABASE_URL: str = "sqlite:///./database/users.db"

    # passlib's bcrypt default cost
    BCRYPT_ROUNDS: int = 12

    APP_TITLE: str = "WebApp"
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
