from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pikepdf"

    seal_backend: str = "local"
    seal_owner_password: str = "paysync-admin"
    seal_remote_base_url: str = ""
    seal_remote_timeout_seconds: int = 30

    batch_max_concurrency: int = Field(default=4, ge=1)
