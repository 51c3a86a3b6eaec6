from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False  # True for structured JSON output, False for colored console

    # Messages
    MESSAGES_LOCALE: str = "en"
    MESSAGES_LOAD_PATH: list[str] = []  # Extra locale files/directories, merged after the bundled ones

    # Property names whose values are never echoed back in error data
    FILTERED_PARAMETERS: list[str] = [
        "passw",
        "secret",
        "token",
        "_key",
        "crypt",
        "salt",
        "certificate",
        "otp",
        "ssn",
    ]

    class Config:
        env_prefix = "STANNUM_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
