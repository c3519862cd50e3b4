"""Application settings loaded from the environment (and `.env`)."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """HTTP-facing settings. Persistence is configured in `domain.toml`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Auth
    jwt_secret: str = Field(default="your_jwt_secret")
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiry_hours: int = Field(default=24)

    # Uploads and static files
    upload_dir: Path = Field(default=Path("uploads"))
    public_dir: Path = Field(default=Path("public"))
    max_upload_bytes: int = Field(default=5 * 1024 * 1024)
    max_images_per_request: int = Field(default=5)
    allowed_image_types: list[str] = Field(default=["jpeg", "jpg", "png", "webp"])

    # HTTP
    cors_origins: list[str] = Field(default=["*"])
    port: int = Field(default=5000)


@lru_cache
def get_settings() -> Settings:
    return Settings()
