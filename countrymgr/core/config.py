# countrymgr/core/config.py
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Metadatos
    PROJECT_NAME: str = "Country Manager"
    PROJECT_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"

    # DB
    DATABASE_URL: str = "sqlite:///./countries.db"
    SQL_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: str | None = None

    # Reglas de captura
    # strict: exactamente 3 letras A-Z / length: 1 a 3 caracteres
    COUNTRY_CODE_POLICY: Literal["strict", "length"] = "strict"
    CAPITALIZE_NAMES: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
