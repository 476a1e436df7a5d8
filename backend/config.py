import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field


class GenerationSettings(BaseModel):
    """Everything the chunk orchestrator needs to talk to Gemini."""

    api_key: str = ""
    model_name: str = "gemini-2.5-flash"
    api_endpoint: Optional[str] = None
    request_timeout: float = Field(default=60.0, gt=0)
    inter_call_delay: float = Field(default=1.0, ge=0)


class Settings(BaseModel):
    """Application-level configuration loaded from environment variables."""

    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    gemini_api_endpoint: Optional[str] = None
    gemini_timeout_seconds: float = Field(default=60.0, gt=0)
    gemini_call_delay_seconds: float = Field(default=1.0, ge=0)
    max_chunk_size: int = Field(default=12000, ge=100)
    max_upload_mb: int = Field(default=100, ge=1)
    upload_dir: Optional[str] = None
    app_env: str = "production"
    allowed_origins: list[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    log_level: str = "INFO"
    port: int = 5000
    rate_limit_enabled: bool = True

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    @property
    def is_development(self) -> bool:
        return self.app_env.strip().lower() == "development"

    @property
    def generation(self) -> GenerationSettings:
        return GenerationSettings(
            api_key=self.gemini_api_key,
            model_name=self.gemini_model,
            api_endpoint=self.gemini_api_endpoint,
            request_timeout=self.gemini_timeout_seconds,
            inter_call_delay=self.gemini_call_delay_seconds,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    raw_origins = os.getenv("ALLOWED_ORIGINS", "http://localhost:5173")
    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        gemini_api_endpoint=os.getenv("GEMINI_API_ENDPOINT") or None,
        gemini_timeout_seconds=os.getenv("GEMINI_TIMEOUT_SECONDS", "60"),
        gemini_call_delay_seconds=os.getenv("GEMINI_CALL_DELAY_SECONDS", "1"),
        max_chunk_size=os.getenv("MAX_CHUNK_SIZE", "12000"),
        max_upload_mb=os.getenv("MAX_UPLOAD_MB", "100"),
        upload_dir=os.getenv("UPLOAD_DIR") or None,
        app_env=os.getenv("APP_ENV", "production"),
        allowed_origins=[o.strip() for o in raw_origins.split(",") if o.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        port=os.getenv("PORT", "5000"),
        rate_limit_enabled=os.getenv("RATE_LIMIT_ENABLED", "true"),
    )
