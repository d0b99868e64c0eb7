"""Settings for the glidequery package."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class GlideQuerySettings(BaseSettings):
    """glidequery configuration settings."""

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = GlideQuerySettings()
