from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # -------------------------
    # App core settings
    # -------------------------
    APP_NAME: str = "Customer Registry"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # -------------------------
    # Storage
    # -------------------------
    # relative paths resolve against the working directory
    CUSTOMERS_FILE: Path = Path("customers.json")

    # -------------------------
    # Pydantic v2 config
    # -------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


# Singleton
settings = Settings()
